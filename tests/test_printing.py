import io

from textprint.printing import print_text


def test_in_file_stream(tmp_path):
    filepath = tmp_path / "file.txt"
    text = "hello"
    with open(filepath, "w", encoding="utf-8") as out:
        print_text(text, out)

    with open(filepath, encoding="utf-8") as stream:
        result = stream.read().split()[0]

    assert result == text


def test_writes_text_unchanged_to_string_stream():
    buffer = io.StringIO()
    print_text("hello world", buffer)
    assert buffer.getvalue() == "hello world"


def test_successive_writes_are_concatenated_without_separator():
    buffer = io.StringIO()
    print_text("hel", buffer)
    print_text("lo", buffer)
    assert buffer.getvalue() == "hello"


def test_default_stream_is_stdout(capsys):
    print_text("hello")
    captured = capsys.readouterr()
    assert captured.out == "hello"
    assert captured.err == ""


def test_empty_text_writes_nothing():
    buffer = io.StringIO()
    print_text("", buffer)
    assert buffer.getvalue() == ""
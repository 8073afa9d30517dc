import ghreport.telegram.clients as telegram_clients


def test_short_text():
    assert telegram_clients.split_text("line 1\nline 2", max_length=100) == ["line 1\nline 2"]


def test_split_on_lines():
    text = "\n".join(f"line {index}" for index in range(10))

    chunks = telegram_clients.split_text(text, max_length=20)

    assert all(len(chunk) <= 20 for chunk in chunks)
    assert "\n".join(chunks) == text


def test_long_line():
    chunks = telegram_clients.split_text("x" * 25, max_length=10)

    assert chunks == ["x" * 10, "x" * 10, "x" * 5]


def test_empty():
    assert telegram_clients.split_text("") == []

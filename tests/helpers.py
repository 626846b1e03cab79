from typing import TextIO


def assert_keywords_in_output(stream: TextIO, *keywords: str) -> None:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    output = str(getvalue()).lower()
    missing = [keyword for keyword in keywords if keyword.lower() not in output]
    assert not missing, f"{missing} not found in {output!r}"

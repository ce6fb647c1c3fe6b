import pytest

from pockets.hello import greet, main


def test_greet_english():
    assert greet("en") == "Hello world"


def test_greet_french():
    assert greet("fr") == "Bonjour le monde"


@pytest.mark.parametrize(
    ("lang", "want"),
    [
        ("en", "Hello world"),
        ("fr", "Bonjour le monde"),
        ("akk", 'unsupported language: "akk"'),
        ("el", "Χαίρετε Κόσμε"),
        ("", 'unsupported language: ""'),
    ],
)
def test_greet(lang, want):
    assert greet(lang) == want


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello world\n"


def test_main_with_lang(capsys):
    main(["-lang", "fr"])
    assert capsys.readouterr().out == "Bonjour le monde\n"


def test_main_with_double_dash_lang(capsys):
    main(["--lang", "vi"])
    assert capsys.readouterr().out == "Xin chào Thế Giới\n"


def test_main_unsupported(capsys):
    main(["--lang", "xx"])
    assert capsys.readouterr().out == 'unsupported language: "xx"\n'
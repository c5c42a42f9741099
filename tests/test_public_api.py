import pbar


def test_public_api_exports_are_importable() -> None:
    for name in pbar.__all__:
        assert getattr(pbar, name) is not None


def test_version_is_set() -> None:
    assert pbar.__version__ == "1.0.0"


def test_end_to_end_with_default_console_reporter(capsys) -> None:
    progress = pbar.create_progress(2)
    progress.start()

    progress.increment()
    progress.increment()

    out = capsys.readouterr().out
    assert "[" + "#" * 50 + " " * 50 + "]" in out
    assert progress.finished is True

import formsmith


def test_get_version_matches_public_api() -> None:
    assert formsmith.get_version() == formsmith.__version__
    assert isinstance(formsmith.__version__, str)

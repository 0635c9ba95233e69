from cubraycaster.errors import CubError, ErrorKind


def test_kind_and_message_without_detail():
    error = CubError(ErrorKind.MAP_OPEN)
    assert error.kind is ErrorKind.MAP_OPEN
    assert error.detail is None
    assert str(error) == ErrorKind.MAP_OPEN.value


def test_detail_is_part_of_message():
    error = CubError(ErrorKind.OPEN_FILE, "missing.cub")
    assert error.detail == "missing.cub"
    assert str(error).startswith(ErrorKind.OPEN_FILE.value)
    assert str(error).endswith("missing.cub")


def test_messages_are_distinct():
    messages = [str(CubError(kind)) for kind in ErrorKind]
    assert len(set(messages)) == len(list(ErrorKind))
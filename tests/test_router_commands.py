# python
"""
tests/test_router_commands.py
Unit tests covering md/mf/rm/cp/mv dispatch through the Router.
"""
import pytest

from fme.errors import (
    ArgumentCountError,
    EmptyCommandError,
    InvalidMoveError,
    InvalidPathError,
    NameCollisionError,
    ResolutionError,
    RootViolationError,
    UnknownCommandError,
)
from fme.router import COMMANDS, Router


def _make_router(*lines: str) -> Router:
    router = Router()
    for line in lines:
        router.dispatch(line)
    return router


def _exists(router: Router, path: str) -> bool:
    return router.root.resolve(tuple(path.strip("/").split("/"))) is not None


def _sample_router() -> Router:
    return _make_router("md /Dir1", "md /Dir2", "md /Dir2/Dir3", "mf /Dir2/Dir3/file.txt")


def test_command_table_is_read_only() -> None:
    assert set(COMMANDS) == {"md", "mf", "rm", "cp", "mv"}
    with pytest.raises(TypeError):
        COMMANDS["ls"] = COMMANDS["md"]


def test_empty_line_is_an_error() -> None:
    router = Router()
    for line in ("", "   ", "\t"):
        with pytest.raises(EmptyCommandError):
            router.dispatch(line)


def test_unknown_command() -> None:
    with pytest.raises(UnknownCommandError) as exc_info:
        Router().dispatch("ls /")
    assert exc_info.value.command == "ls"


@pytest.mark.parametrize(
    "line, expected, got",
    [("md", 1, 0), ("md /a /b", 1, 2), ("rm", 1, 0), ("cp /a", 2, 1), ("mv /a /b /c", 2, 3)],
)
def test_argument_count(line: str, expected: int, got: int) -> None:
    with pytest.raises(ArgumentCountError) as exc_info:
        Router().dispatch(line)
    assert exc_info.value.expected == expected
    assert exc_info.value.got == got


def test_invalid_path_argument() -> None:
    router = Router()
    with pytest.raises(InvalidPathError):
        router.dispatch("md Dir1")
    with pytest.raises(InvalidPathError):
        router.dispatch("md /Dir1/")
    assert len(router.root) == 0


def test_md_creates_directory() -> None:
    router = _make_router("md /Test")
    node = router.root.find_child("Test")
    assert node is not None and node.is_directory


def test_md_requires_parent() -> None:
    router = Router()
    with pytest.raises(ResolutionError) as exc_info:
        router.dispatch("md /Dir1/Dir2/NewDir")
    assert "intermediate directories" in str(exc_info.value)


def test_md_twice_is_a_collision() -> None:
    router = _make_router("md /a")
    with pytest.raises(NameCollisionError):
        router.dispatch("md /a")
    assert [child.name for child in router.root] == ["a"]


def test_md_over_file_is_a_collision() -> None:
    router = _make_router("mf /a")
    with pytest.raises(NameCollisionError):
        router.dispatch("md /a")
    assert not router.root.find_child("a").is_directory


def test_md_root_is_a_collision() -> None:
    with pytest.raises(NameCollisionError):
        Router().dispatch("md /")


def test_mf_is_idempotent_for_files() -> None:
    router = _make_router("mf /x")
    router.dispatch("mf /x")
    assert len(router.root) == 1
    assert not router.root.find_child("x").is_directory


def test_mf_over_directory_is_a_collision() -> None:
    router = _make_router("md /a")
    with pytest.raises(NameCollisionError):
        router.dispatch("mf /a")
    assert router.root.find_child("a").is_directory


def test_mf_requires_parent() -> None:
    with pytest.raises(ResolutionError):
        Router().dispatch("mf /missing/file.txt")


def test_mf_parent_cannot_be_a_file() -> None:
    router = _make_router("mf /f")
    with pytest.raises(ResolutionError):
        router.dispatch("mf /f/g")


def test_rm_removes_subtree() -> None:
    router = _sample_router()
    router.dispatch("rm /Dir2/Dir3")
    assert not _exists(router, "/Dir2/Dir3")
    assert _exists(router, "/Dir2")
    router.dispatch("rm /Dir2")
    assert router.root.count() == 2


def test_rm_file() -> None:
    router = _sample_router()
    router.dispatch("rm /Dir2/Dir3/file.txt")
    assert not _exists(router, "/Dir2/Dir3/file.txt")


def test_rm_missing_target() -> None:
    router = _sample_router()
    with pytest.raises(ResolutionError):
        router.dispatch("rm /Dir1/nothing")
    with pytest.raises(ResolutionError):
        router.dispatch("rm /nothing/at/all")


@pytest.mark.parametrize("lines", [(), ("md /a", "mf /a/b")])
def test_rm_root_always_fails(lines) -> None:
    router = _make_router(*lines)
    before = router.render()
    with pytest.raises(RootViolationError):
        router.dispatch("rm /")
    assert router.render() == before


def test_cp_into_directory_keeps_base_name() -> None:
    router = _sample_router()
    before = router.root.count()
    router.dispatch("cp /Dir2/Dir3 /Dir1")
    assert _exists(router, "/Dir1/Dir3/file.txt")
    assert _exists(router, "/Dir2/Dir3/file.txt")
    assert router.root.count() == before + 2


def test_cp_produces_independent_subtrees() -> None:
    router = _sample_router()
    router.dispatch("cp /Dir2/Dir3 /Dir1")
    router.dispatch("mf /Dir1/Dir3/only_in_copy.txt")
    router.dispatch("rm /Dir2/Dir3/file.txt")
    assert _exists(router, "/Dir1/Dir3/file.txt")
    assert not _exists(router, "/Dir2/Dir3/only_in_copy.txt")
    copied = router.root.resolve(("Dir1", "Dir3"))
    original = router.root.resolve(("Dir2", "Dir3"))
    assert copied is not original


def test_cp_with_rename() -> None:
    router = _sample_router()
    router.dispatch("cp /Dir2/Dir3/file.txt /Dir1/newfile.txt")
    node = router.root.resolve(("Dir1", "newfile.txt"))
    assert node is not None and not node.is_directory
    assert _exists(router, "/Dir2/Dir3/file.txt")


def test_cp_file_into_directory() -> None:
    router = _sample_router()
    router.dispatch("cp /Dir2/Dir3/file.txt /Dir1")
    assert _exists(router, "/Dir1/file.txt")


def test_cp_into_root() -> None:
    router = _sample_router()
    router.dispatch("cp /Dir2/Dir3 /")
    assert _exists(router, "/Dir3/file.txt")


def test_cp_missing_source() -> None:
    router = _sample_router()
    with pytest.raises(ResolutionError) as exc_info:
        router.dispatch("cp /nothing /Dir1")
    assert "doesn't exist" in str(exc_info.value)


def test_cp_missing_destination_parent() -> None:
    router = _sample_router()
    with pytest.raises(ResolutionError) as exc_info:
        router.dispatch("cp /Dir2/Dir3 /nowhere/Dir3")
    assert "destination directory" in str(exc_info.value)


def test_cp_onto_existing_file() -> None:
    router = _make_router("mf /a", "mf /b")
    with pytest.raises(NameCollisionError) as exc_info:
        router.dispatch("cp /a /b")
    assert "file already exists" in str(exc_info.value)


def test_cp_name_taken_inside_target_directory() -> None:
    router = _make_router("md /src", "md /dst", "mf /dst/src")
    before = router.render()
    with pytest.raises(NameCollisionError):
        router.dispatch("cp /src /dst")
    assert router.render() == before


def test_cp_directory_into_itself() -> None:
    router = _make_router("md /a", "mf /a/f")
    router.dispatch("cp /a /a")
    assert _exists(router, "/a/a/f")
    assert router.root.count() == 5


def test_cp_root_is_rejected() -> None:
    router = _sample_router()
    with pytest.raises(RootViolationError):
        router.dispatch("cp / /Dir1")


def test_mv_relocates_subtree() -> None:
    router = _sample_router()
    before = router.root.count()
    original = router.root.resolve(("Dir2", "Dir3"))
    router.dispatch("mv /Dir2/Dir3 /Dir1")
    assert _exists(router, "/Dir1/Dir3/file.txt")
    assert not _exists(router, "/Dir2/Dir3")
    assert router.root.count() == before
    moved_file = router.root.resolve(("Dir1", "Dir3", "file.txt"))
    assert moved_file is original.children[0]


def test_mv_with_rename() -> None:
    router = _sample_router()
    router.dispatch("mv /Dir2/Dir3/file.txt /Dir2/renamed.txt")
    assert _exists(router, "/Dir2/renamed.txt")
    assert not _exists(router, "/Dir2/Dir3/file.txt")


def test_mv_into_own_subtree_fails() -> None:
    router = _sample_router()
    before = router.render()
    with pytest.raises(InvalidMoveError):
        router.dispatch("mv /Dir2 /Dir2/Dir3")
    with pytest.raises(InvalidMoveError):
        router.dispatch("mv /Dir2 /Dir2")
    with pytest.raises(InvalidMoveError):
        router.dispatch("mv /Dir2 /Dir2/Dir3/sub")
    assert router.render() == before


def test_mv_onto_same_named_directory_entry_fails() -> None:
    router = _make_router("md /a", "mf /a/x", "md /b", "md /b/x")
    before = router.render()
    with pytest.raises(NameCollisionError):
        router.dispatch("mv /a/x /b")
    assert router.render() == before


def test_mv_into_own_parent_fails() -> None:
    router = _make_router("md /a", "mf /a/f")
    with pytest.raises(NameCollisionError):
        router.dispatch("mv /a/f /a")
    assert _exists(router, "/a/f")


def test_mv_onto_existing_file() -> None:
    router = _make_router("mf /a", "mf /b")
    with pytest.raises(NameCollisionError):
        router.dispatch("mv /a /b")
    assert _exists(router, "/a")


def test_mv_root_is_rejected() -> None:
    with pytest.raises(RootViolationError):
        _sample_router().dispatch("mv / /Dir1")

import pytest

from hbsdata.errors import RenderError, RenderErrorKind
from hbsdata.path import (
    Path,
    PathSeg,
    Rule,
    merge_json_path,
    parse_path_segments,
)

N = PathSeg.named
ROOT = PathSeg.ruled(Rule.PATH_ROOT)
UP = PathSeg.ruled(Rule.PATH_UP)
LOCAL = PathSeg.ruled(Rule.PATH_LOCAL)

REFERENCES = [
    "a",
    "abc",
    "../a",
    "a.b",
    "@abc",
    "a.[abc]",
    "aBc.[abc]",
    "abc.[0].[nice]",
    "some-name",
    "this.[0].ok",
    "this.[$id]",
    "[$id]",
    "$id",
    "this.[null]",
]

PATHS = [
    "a",
    "a.b.c.d",
    "a.[0].[1].[2]",
    "a.[abc]",
    "a/v/c.d.s",
    "a.[0]/b/c/d",
    "a.[bb c]/b/c/d",
    "a.[0].[#hello]",
    "../a/b.[0].[1]",
    "this.[0]/[1]/this/a",
    "./this_name",
    "./goo/[/bar]",
    "a.[你好]",
    "a.[10].[#comment]",
    "a.[]",
    "./[/foo]",
    "[foo]",
    "@root/a/b",
    "nullable",
]


@pytest.mark.parametrize("raw", REFERENCES + PATHS)
def test_paths_parse(raw):
    path = Path.parse(raw)
    assert path.raw == raw
    assert len(path.segments) >= 1


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a.[0].[1].[2]", [N("a"), N("0"), N("1"), N("2")]),
        ("a.[bb c]/b/c/d", [N("a"), N("bb c"), N("b"), N("c"), N("d")]),
        ("../a/b.[0].[1]", [UP, N("a"), N("b"), N("0"), N("1")]),
        ("this.[0]/[1]/this/a", [N("0"), N("1"), N("a")]),
        ("./this_name", [N("this_name")]),
        ("./goo/[/bar]", [N("goo"), N("/bar")]),
        ("a.[你好]", [N("a"), N("你好")]),
        ("a.[]", [N("a"), N("")]),
        ("@root/a/b", [ROOT, N("a"), N("b")]),
        ("this.[0].ok", [N("0"), N("ok")]),
        ("[$id]", [N("$id")]),
        ("this", []),
        ("./addr/country", [N("addr"), N("country")]),
        ("addr.[country]", [N("addr"), N("country")]),
        ("titles.[0]", [N("titles"), N("0")]),
        ("@root/b", [ROOT, N("b")]),
        ("z.[1]", [N("z"), N("1")]),
    ],
)
def test_segments(raw, expected):
    assert parse_path_segments(raw) == expected
    assert Path.parse(raw).segs() == tuple(expected)


def test_local_paths():
    assert Path.parse("@abc").local == (0, "abc")
    assert Path.parse("@abc").segs() is None
    assert Path.parse("@../index").local == (1, "index")
    assert Path.parse("@../index").segments == (LOCAL, UP, N("index"))


def test_relative_path_is_not_local():
    assert Path.parse("../a").local is None


@pytest.mark.parametrize("raw", ["", "a b", "a..b", "..a", "a.[open", "a.", "#x"])
def test_invalid_paths(raw):
    with pytest.raises(RenderError) as info:
        Path.parse(raw)
    assert info.value.kind is RenderErrorKind.INVALID_JSON_PATH
    assert str(info.value) == f"Invalid json path {raw}"


def test_current_and_named():
    assert Path.current().segs() == ()
    path = Path.with_named_paths(["a", "b"])
    assert path.raw == "a/b"
    assert path.segs() == (N("a"), N("b"))


def test_merge_json_path():
    segs = parse_path_segments("@root/../a.[0]")
    assert merge_json_path(["x"], segs) == ["x", "a", "0"]
    base = ["y"]
    assert merge_json_path(base, [N("z")]) == ["y", "z"]
    assert base == ["y"]
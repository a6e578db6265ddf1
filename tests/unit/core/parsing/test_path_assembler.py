from __future__ import annotations

"""
Unit tests for the Tree Path Assembler.

Verifies:
1. Full path construction for well-formed diagrams.
2. Comment capture and last-write-wins on duplicates.
3. Documented leniencies for malformed or inconsistent input.
"""

from dircraft.core.parsing import parse_tree


def test_sample_tree_paths_and_comments(sample_tree, sample_paths) -> None:
    result = parse_tree(sample_tree)

    assert result.paths == sample_paths
    assert result.comments == {
        "project/src/components/Button.js": "Button component",
        "project/package.json": "Project dependencies",
    }


def test_empty_input_is_not_an_error() -> None:
    result = parse_tree("")
    assert result.paths == []
    assert result.comments == {}


def test_blank_lines_only() -> None:
    assert parse_tree("\n   \n\t\n").paths == []


def test_single_unstructured_line_becomes_root() -> None:
    result = parse_tree("not a valid structure")
    assert result.paths == ["not a valid structure"]
    assert result.comments == {}


def test_root_comment_is_recorded() -> None:
    result = parse_tree("app/ # Root folder\n└── main.py")
    assert result.paths == ["app/", "app/main.py"]
    assert result.comments["app/"] == "Root folder"


def test_blank_lines_between_entries_are_ignored() -> None:
    text = "app/\n\n├── a.txt\n\n└── b.txt\n"
    assert parse_tree(text).paths == ["app/", "app/a.txt", "app/b.txt"]


def test_crlf_line_endings() -> None:
    text = "app/\r\n├── lib/\r\n│   └── core.py # Core\r\n└── setup.py\r\n"
    result = parse_tree(text)
    assert result.paths == ["app/", "app/lib/", "app/lib/core.py", "app/setup.py"]
    assert result.comments == {"app/lib/core.py": "Core"}


def test_empty_root_name_keeps_parsing() -> None:
    text = "│\n├── a.txt\n└── b/"
    result = parse_tree(text)
    assert result.paths == ["a.txt", "b/"]


def test_glyph_only_lines_are_skipped() -> None:
    text = "app/\n├── a.txt\n│\n└── b.txt"
    assert parse_tree(text).paths == ["app/", "app/a.txt", "app/b.txt"]


def test_return_to_shallower_level_pops_ancestors() -> None:
    text = (
        "root/\n"
        "├── a/\n"
        "│   ├── b/\n"
        "│   │   └── deep.txt\n"
        "│   └── mid.txt\n"
        "└── top.txt\n"
    )
    assert parse_tree(text).paths == [
        "root/",
        "root/a/",
        "root/a/b/",
        "root/a/b/deep.txt",
        "root/a/mid.txt",
        "root/top.txt",
    ]


def test_directory_prefix_holds_for_deeper_lines() -> None:
    """Every directory prefixes the deeper lines that follow it."""
    text = (
        "root/\n"
        "├── a/\n"
        "│   ├── x.txt\n"
        "│   └── y/\n"
        "│   │   └── z.txt\n"
        "└── b.txt\n"
    )
    paths = parse_tree(text).paths
    assert paths[2].startswith("root/a/")
    assert paths[3].startswith("root/a/")
    assert paths[4].startswith("root/a/y/")
    assert not paths[5].startswith("root/a/")


def test_insufficient_ancestors_fall_back_to_top() -> None:
    """Quirk: depth deeper than the known ancestors attaches to the nearest one."""
    text = "root/\n│   │   └── orphan.txt\n"
    assert parse_tree(text).paths == ["root/", "root/orphan.txt"]


def test_children_of_last_directory_without_bars_are_siblings() -> None:
    """Quirk: depth only counts bars, so space-indented children land at depth 0."""
    text = "root/\n└── src/\n    └── main.py\n"
    assert parse_tree(text).paths == ["root/", "root/src/", "root/main.py"]


def test_bar_inside_comment_changes_parent() -> None:
    """Regression: a stray bar in a comment deepens the line."""
    text = (
        "root/\n"
        "├── a/\n"
        "│   └── x.txt\n"
        "└── b.txt # uses │ glyph\n"
    )
    result = parse_tree(text)
    assert result.paths[-1] == "root/a/b.txt"
    assert result.comments["root/a/b.txt"] == "uses │ glyph"


def test_duplicate_paths_last_comment_wins() -> None:
    text = "root/\n├── a.txt # first\n└── a.txt # second\n"
    result = parse_tree(text)
    assert result.paths == ["root/", "root/a.txt", "root/a.txt"]
    assert result.comments == {"root/a.txt": "second"}


def test_parse_is_deterministic(sample_tree) -> None:
    assert parse_tree(sample_tree) == parse_tree(sample_tree)

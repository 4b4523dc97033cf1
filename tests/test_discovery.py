"""
Tests for splix.discovery

Test Coverage:
- discover_images(): file roots, directory depth, filtering, exclusion
- collect_sources(): multiple roots and de-duplication
"""

import pytest

from splix.discovery import collect_sources, discover_images


@pytest.fixture
def image_tree(tmp_path, make_image):
    """
    tree/
    ├── a.png
    ├── b.jpg
    ├── notes.txt
    ├── .hidden.png
    ├── sub/c.png
    └── out/old-r0c0.png
    """
    root = tmp_path / "tree"
    make_image(root / "a.png")
    make_image(root / "b.jpg")
    (root / "notes.txt").write_text("not an image")
    make_image(root / ".hidden.png")
    make_image(root / "sub" / "c.png")
    make_image(root / "out" / "old-r0c0.png")
    return root


def test_directory_non_recursive_lists_direct_images(image_tree):
    found = discover_images(image_tree)
    assert [p.name for p in found] == ["a.png", "b.jpg"]


def test_directory_recursive_descends(image_tree):
    found = discover_images(image_tree, recursive=True)
    assert [p.relative_to(image_tree).as_posix() for p in found] == [
        "a.png", "b.jpg", "out/old-r0c0.png", "sub/c.png",
    ]


def test_excluded_output_directory_is_skipped(image_tree):
    found = discover_images(image_tree, recursive=True, exclude=image_tree / "out")
    assert "old-r0c0.png" not in [p.name for p in found]
    assert "c.png" in [p.name for p in found]


def test_file_root_is_returned_as_is(image_tree):
    """Explicit files are kept even without an image suffix; decoding decides."""
    assert discover_images(image_tree / "notes.txt") == [image_tree / "notes.txt"]


def test_missing_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="does not exist"):
        discover_images(tmp_path / "nope")


def test_collect_sources_deduplicates(image_tree):
    sources = collect_sources([image_tree / "a.png", image_tree])
    assert [p.name for p in sources] == ["a.png", "b.jpg"]


def test_collect_sources_missing_root_raises(image_tree):
    with pytest.raises(FileNotFoundError):
        collect_sources([image_tree, image_tree / "missing"])

import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import splix
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def quadrant_image() -> Image.Image:
    """10x10 RGB image with a distinct colour in each 5x5 quadrant."""
    img = Image.new("RGB", (10, 10))
    colours = {(0, 0): (255, 0, 0), (5, 0): (0, 255, 0), (0, 5): (0, 0, 255), (5, 5): (255, 255, 0)}
    for (left, top), colour in colours.items():
        img.paste(colour, (left, top, left + 5, top + 5))
    return img


@pytest.fixture
def sample_image(tmp_path: Path) -> Path:
    """Create a simple 200x100 test image."""
    img_path = tmp_path / "sample.png"
    Image.new("RGB", (200, 100), color="white").save(img_path)
    return img_path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory that does not exist yet."""
    return tmp_path / "out"


@pytest.fixture
def make_image():
    """Factory that writes a synthetic image to a path and returns the path."""
    def _make(path: Path, size=(10, 10), mode="RGB", color="white") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color=color).save(path)
        return path
    return _make

"""Stand-ins shared by the badge tests."""
import io
import sys
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeFont:
    """Every glyph is half the font size wide and lines are exactly ``size`` tall."""

    name = "Helvetica-Bold"

    def __init__(self, line_spacing=1.0):
        self.line_spacing = line_spacing

    def width(self, text, size):
        return len(text) * size * 0.5

    def line_height(self, size):
        return float(size)


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


def make_png(path, color="white", size=(40, 40)):
    Image.new("RGB", size, color).save(path, "PNG")
    return path


def image_reader(color="white"):
    buf = io.BytesIO()
    Image.new("RGB", (20, 20), color).save(buf, "PNG")
    buf.seek(0)
    return ImageReader(Image.open(buf))

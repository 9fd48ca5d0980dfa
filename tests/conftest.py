import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import simulado_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from simulado_toolkit.core.models import Question


class WordSplitter:
    """
    Deterministic stand-in for LineSplitter.
    
    Every line holds at most ``words_per_line`` words and every character
    is 5pt wide, so line counts can be worked out by hand.
    """
    
    CHAR_WIDTH = 5
    
    def __init__(self, words_per_line: int = 3):
        self.words_per_line = words_per_line
    
    def font_for(self, bold: bool) -> str:
        return "Helvetica-Bold" if bold else "Helvetica"
    
    def width_of(self, text, bold=False, size=None):
        return len(text) * self.CHAR_WIDTH
    
    def split(self, text, width, bold=False):
        words = text.split()
        if not words:
            return [""]
        n = self.words_per_line
        return [" ".join(words[i:i + n]) for i in range(0, len(words), n)]


# Common test fixtures
@pytest.fixture
def make_splitter():
    """Factory for splitters with a custom words-per-line count."""
    return WordSplitter


@pytest.fixture
def word_splitter():
    """Splitter with three words per line."""
    return WordSplitter(3)


@pytest.fixture
def make_question():
    """Factory for questions with sensible defaults."""
    def _create(
        statement: str = "Qual é a capital do Brasil?",
        options=("Rio de Janeiro", "Brasília", "São Paulo"),
        correct_answer: str = "Brasília",
        **kwargs,
    ) -> Question:
        return Question(
            statement=statement,
            options=tuple(options),
            correct_answer=correct_answer,
            **kwargs,
        )
    return _create


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (140, 68), color="white")
    img_path = tmp_path / "logo.png"
    img.save(img_path)
    return img_path

import pytest
import tempfile
import shutil
from pathlib import Path

from tacos.core.models import PricingModel


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def word_counter():
    """Deterministic token counter: one token per whitespace-separated word."""
    return lambda text: len(text.split())


@pytest.fixture
def input_model():
    return PricingModel("test-input", input_rate=2.0, output_rate=4.0, context_window=1000)


@pytest.fixture
def output_model():
    return PricingModel("test-output", input_rate=1.0, output_rate=8.0, context_window=1000)


@pytest.fixture
def embedding_model():
    """Model without an output rate."""
    return PricingModel("test-embedding", input_rate=0.1)


def words(count: int) -> str:
    return " ".join(["word"] * count)


@pytest.fixture
def sample_repo(temp_workspace):
    """Create a sample repository structure for testing."""
    repo_root = temp_workspace / "sample_repo"
    repo_root.mkdir()

    # Create directory structure
    (repo_root / "src").mkdir()
    (repo_root / "src" / "utils").mkdir()
    (repo_root / "docs").mkdir()
    (repo_root / "build").mkdir()
    (repo_root / ".git").mkdir()
    (repo_root / "node_modules").mkdir()

    # Create files
    (repo_root / ".gitignore").write_text("build/\n*.log\n")
    (repo_root / "README.md").write_text(words(10))
    (repo_root / "debug.log").write_text(words(50))
    (repo_root / "src" / "main.py").write_text(words(100))
    (repo_root / "src" / "utils" / "helpers.py").write_text(words(30))
    (repo_root / "src" / "utils" / "trace.log").write_text(words(7))
    (repo_root / "docs" / "guide.md").write_text(words(20))
    (repo_root / "build" / "out.txt").write_text(words(40))
    (repo_root / ".git" / "config").write_text("[core]\n    repositoryformatversion = 0")
    (repo_root / "node_modules" / "package.json").write_text('{"name": "test"}')

    # Create binary file
    (repo_root / "image.png").write_bytes(b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR')

    return repo_root

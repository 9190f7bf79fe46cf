from pathlib import Path

from seteuk.knowledge.exceptions import ReferenceLoadError

_DEFAULT_REFERENCE_DIR = Path(__file__).parent / "reference"

CURRICULUM_INFORMATICS = "curriculum_informatics.txt"
CURRICULUM_AI_BASICS = "curriculum_ai_basics.txt"
STUDENT_RECORD_EXAMPLES = "student_record_examples.txt"

DEFAULT_CORPORA: tuple[str, ...] = (
    CURRICULUM_INFORMATICS,
    CURRICULUM_AI_BASICS,
    STUDENT_RECORD_EXAMPLES,
)


def load_reference_text(name: str, reference_dir: Path | None = None) -> str:
    """Load one bundled reference corpus.

    Raises:
        ReferenceLoadError: if the file cannot be read.
    """
    path = (reference_dir or _DEFAULT_REFERENCE_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReferenceLoadError(f"Failed to load reference corpus: {exc}") from exc


def load_default_corpora(reference_dir: Path | None = None) -> list[str]:
    return [load_reference_text(name, reference_dir) for name in DEFAULT_CORPORA]

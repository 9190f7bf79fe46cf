from pathlib import Path

from seteuk.generation.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_instruction(path: Path | None = None) -> str:
    """Load the system instruction sent with every structured generation.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled system_instruction.txt.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_instruction.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load system instruction: {exc}") from exc


def load_revision_template(path: Path | None = None) -> str:
    """Load the revision prompt template, trimmed. It must contain a {text} placeholder.

    Raises:
        PromptLoadError: if the file cannot be read or lacks the placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "revision_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load revision prompt: {exc}") from exc
    if "{text}" not in template:
        raise PromptLoadError(f"Revision prompt {path} has no {{text}} placeholder")
    return template.strip()

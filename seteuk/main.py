import asyncio
import json
import sys
from pathlib import Path

from seteuk.assistant.assistant import build_assistant
from seteuk.assistant.exceptions import AssistantError
from seteuk.config.settings import Settings
from seteuk.generation.exceptions import GenerationError
from seteuk.logging.logger import Log
from seteuk.records.codec import activity_from_dict, params_from_dict, result_to_dict
from seteuk.storage.connection import close_pool
from seteuk.text.byte_length import measure


def main() -> None:
    """Entry point: load settings -> build assistant -> generate one record from a JSON request."""
    settings = Settings()
    # stdout carries the JSON result only.
    Log.configure(settings.log_level, stream=sys.stderr)

    if len(sys.argv) != 2:
        Log.error("Usage: seteuk <request.json>")
        raise SystemExit(2)

    request = json.loads(Path(sys.argv[1]).read_text(encoding="utf-8"))
    params = params_from_dict(request)
    activity, activity_date = activity_from_dict(request)
    try:
        assistant = build_assistant(settings)
        history_id, result = asyncio.run(
            assistant.generate(params, activity=activity, activity_date=activity_date)
        )
    except (GenerationError, AssistantError) as exc:
        Log.error(f"Generation failed: {exc}")
        raise SystemExit(1) from exc
    finally:
        close_pool()

    stats = measure(result.grade_version)
    output = {
        "historyId": history_id,
        "result": result_to_dict(result),
        "stats": {"chars": stats.chars, "charsNoSpace": stats.chars_no_space, "bytes": stats.bytes},
    }
    print(json.dumps(output, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

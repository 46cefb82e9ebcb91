import argparse
import logging
import sys
from pathlib import Path

from config.log import setup_logging
from config.settings import load_settings
from core.errors import CompassError, ConfigurationError, InvalidImageError
from core.llm_vision import AnalysisClient
from core.prompts import load_prompt
from core.session import AnalysisSession
from services.analysis_service import analysis_stream
from services.export import save_report
from services.image_loader import load_image_path

logger = logging.getLogger("app_cli")


# ==================================================
# Arguments
# ==================================================
def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Analyse a performance compass image with Gemini (streaming)."
    )
    parser.add_argument("image", type=Path, help="Path to the compass image")
    parser.add_argument("-o", "--output", type=Path, help="Save the report to this .txt file")
    parser.add_argument("--prompt-file", type=Path, help="Use a custom prompt instead of the default")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING...")
    return parser.parse_args(argv)


def main(argv=None, client=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        if client is None:
            settings = load_settings()
            client = AnalysisClient(settings)
            prompt = load_prompt(args.prompt_file or settings.prompt_file)
        else:
            prompt = load_prompt(args.prompt_file)

        session = AnalysisSession()
        session.select_image(load_image_path(args.image))
    except (ConfigurationError, InvalidImageError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except CompassError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # ==================================================
    # Model call
    # ==================================================
    for fragment in analysis_stream(session, client, prompt):
        print(fragment, end="", flush=True)
    print()

    result = session.result
    if not result.is_complete:
        print(f"Analysis failed: {result.error}", file=sys.stderr)
        return 1

    if args.output:
        save_report(result, args.output)
        print(f"Report saved to {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())

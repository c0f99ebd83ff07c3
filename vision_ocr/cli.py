"""Command-line entry point: detect text in one image with Cloud Vision.

Examples
  vision-ocr -service_account sa.json -input receipt.png
  vision-ocr -client_id client_id.json -input receipt.png

Defaults for the flags can come from the environment or a .env file:
  VISION_OCR_SERVICE_ACCOUNT, VISION_OCR_CLIENT_ID, VISION_OCR_INPUT
Set VISION_OCR_DEBUG=true for timestamped debug logging on stderr.
"""

import argparse
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config import OCRConfig
from .errors import VisionOCRError
from .output import write_text_output
from .pipeline import DetectionPipeline
from .utils import redact_sensitive_data, setup_logger


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="vision-ocr",
        description="OCR an image with Cloud Vision and print the detected text."
    )
    p.add_argument(
        "-service_account",
        default=os.getenv("VISION_OCR_SERVICE_ACCOUNT", ""),
        help="Path to a service account credentials file",
    )
    p.add_argument(
        "-client_id",
        default=os.getenv("VISION_OCR_CLIENT_ID", ""),
        help="Path to a client ID credentials file",
    )
    p.add_argument(
        "-input",
        default=os.getenv("VISION_OCR_INPUT", ""),
        help="Path to an image with text to be OCRed",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))  # no-op if no .env
    args = _parse_args(argv)

    logger = setup_logger(
        debug_mode=os.getenv("VISION_OCR_DEBUG", "false").lower() == "true"
    )

    try:
        config = OCRConfig.from_values(
            service_account_file=args.service_account,
            client_id_file=args.client_id,
            input_path=args.input,
        )
        result = DetectionPipeline(config).run()
    except VisionOCRError as e:
        logger.error(redact_sensitive_data(str(e)))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130

    write_text_output(result.annotations)
    return 0


if __name__ == "__main__":
    sys.exit(main())

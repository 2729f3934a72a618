"""
urlspell command line

    urlspell train access.log https://example.com/links.html
    urlspell correct dcos.rs norvig.cmo
"""
import argparse
import logging
import sys
from pathlib import Path

from .config import get_settings
from .corrector import URLCorrector
from .sources import read_source

logger = logging.getLogger("cli")


def cmd_train(args) -> int:
    path = Path(args.model)
    if path.exists() and not args.reset:
        corrector = URLCorrector.load(path)
    else:
        corrector = URLCorrector()

    with corrector:
        for source in args.sources:
            try:
                text = read_source(source)
            except OSError as e:
                logger.error(f"❌ Cannot read {source}: {e}")
                return 1
            corrector.train(text)
        corrector.save(path)
    return 0


def cmd_correct(args) -> int:
    with URLCorrector.load(args.model) as corrector:
        for token in args.tokens:
            # Sites are stored lowercased
            correction = corrector.correct(token.lower())
            print(f"{token} -> {correction if correction is not None else '(no correction)'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="urlspell", description="Frequency-based URL corrector")
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    train = sub.add_parser('train', help='Count sites found in files or URLs')
    train.add_argument('sources', nargs='+', help='File paths or http(s) URLs')
    train.add_argument('--model', default=settings.MODEL_PATH,
                       help=f'Model file to update (default: {settings.MODEL_PATH})')
    train.add_argument('--reset', action='store_true', help='Ignore any existing model file')
    train.set_defaults(func=cmd_train)

    correct = sub.add_parser('correct', help='Correct one or more sites')
    correct.add_argument('tokens', nargs='+')
    correct.add_argument('--model', default=settings.MODEL_PATH,
                         help=f'Model file to read (default: {settings.MODEL_PATH})')
    correct.set_defaults(func=cmd_correct)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(message)s',
    )
    try:
        return args.func(args)
    except FileNotFoundError as e:
        logger.error(f"🔥 Model not found: {e.filename}")
    except ValueError as e:
        logger.error(f"🔥 {e}")
    return 1


if __name__ == "__main__":
    sys.exit(main())

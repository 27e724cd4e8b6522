import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from . import __version__
from .engine import run_request
from .errors import CipherError, InvalidArgumentError, WriteError
from .interactive import collect_request, print_banner, print_goodbye
from .models import Algorithm, CipherRequest, FilePath, InlineText, Operation
from .utils import DEFAULT_ENCODING, parse_key

logger = logging.getLogger("ciphery")

EXAMPLES = """\
examples:
  # Encrypt the text 'hello' using Caesar cipher with a shift of 3
  ciphery encrypt -t hello -a caesar -k 3

  # Decrypt the text 'khoor' using Caesar cipher with a shift of 3
  ciphery decrypt -t khoor -a caesar -k 3

  # Encrypt the contents of a file
  ciphery encrypt --file-path notes.txt -a caesar -k 7

  # Launch without any parameters to enter interactive mode
  ciphery
"""


def _key_type(value: str) -> int:
    try:
        return parse_key(value)
    except InvalidArgumentError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_operation_parser(subparsers, operation: Operation, help_text: str) -> None:
    op_parser = subparsers.add_parser(operation.value, help=help_text, description=help_text)
    source = op_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-t", "--text", help=f"Text to {operation.value}.")
    source.add_argument(
        "-f", "--file-path", dest="file_path", help=f"Read the text to {operation.value} from a file."
    )
    op_parser.add_argument(
        "-a",
        "--algo",
        choices=[a.value for a in Algorithm],
        default=Algorithm.CAESAR.value,
        help="Cipher algorithm (default: caesar). rot13 and base64 are reserved.",
    )
    op_parser.add_argument(
        "-k",
        "--key",
        type=_key_type,
        help="Cipher key. For Caesar this is the shift amount; negative values shift left.",
    )
    op_parser.add_argument("-o", "--out-file", help="Write the result to a file instead of stdout.")
    op_parser.set_defaults(operation=operation)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ciphery",
        description="A lightweight command-line encryption/decryption tool. "
        "Run without arguments to enter interactive mode.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Encoding of input files and --out-file (default: {DEFAULT_ENCODING}).",
    )
    parser.add_argument("--no-banner", action="store_true", help="Do not print the interactive banner.")
    subparsers = parser.add_subparsers(dest="command")

    _add_operation_parser(subparsers, Operation.ENCRYPT, "Perform encryption operation")
    _add_operation_parser(subparsers, Operation.DECRYPT, "Perform decryption operation")
    return parser


def request_from_args(args: argparse.Namespace) -> CipherRequest:
    if args.text is not None:
        source = InlineText(args.text)
    else:
        source = FilePath(args.file_path)
    return CipherRequest(
        operation=args.operation,
        algorithm=Algorithm(args.algo),
        key=args.key,
        source=source,
    )


def _write_output(result: str, out_file: Optional[str], encoding: str) -> None:
    if out_file:
        # encode up front so a bad codec never leaves a truncated file behind
        try:
            data = result.encode(encoding)
        except LookupError as exc:
            raise InvalidArgumentError(f"Unknown encoding '{encoding}'.") from exc
        except UnicodeEncodeError as exc:
            raise WriteError(f"Result cannot be written to '{out_file}' as {encoding} text.") from exc
        with open(out_file, "wb") as fh:
            fh.write(data)
        logger.info("Result written to %s", out_file)
    else:
        print(result)


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False


def _run_interactive(args: argparse.Namespace, console: Console) -> None:
    if not args.no_banner:
        print_banner(console)
    try:
        request = collect_request(console)
        if request is None:
            return
        result = run_request(request, encoding=args.encoding)
        console.print()
        console.print(f"[bold green]{request.operation.value.capitalize()}ed text:[/bold green]")
        console.print(result, markup=False, highlight=False)
    finally:
        print_goodbye(console)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command is None:
            _run_interactive(args, Console())
        else:
            request = request_from_args(args)
            logger.info("Request: %s", request.describe())
            result = run_request(request, encoding=args.encoding)
            _write_output(result, args.out_file, args.encoding)
    except CipherError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\naborted", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

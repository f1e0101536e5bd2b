"""Main entry point for mocksmith."""

import argparse
import re
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

from .application import GeneratorOptions, Mocksmith
from .domain.exceptions import MocksmithError
from .domain.models.mock import MethodsToMockStrategy, MockHeader
from .domain.services.naming import SedReplacement, default_name_output_file
from .infrastructure.config import SUPPORTED_STANDARDS, Config, uses_simplified_namespaces
from .infrastructure.logging import LoggerSetup, get_logger
from .utils.path_utils import maybe_write_file


def _class_filter(value: str) -> str:
    try:
        re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"Invalid class filter regex: {e}") from e
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="mocksmith",
        description="Generate mocks for the Google Mock framework (gMock) from C++ header "
        "files. If no header files are given, the C++ code is read from stdin.",
        epilog="""
Examples:
  # Print mocks for the classes in a header
  mocksmith include/foo/ifoo.h

  # Write one mock header for several headers
  mocksmith -I include -o test/mocks.h include/foo/ifoo.h include/bar/ibar.h

  # Write one mock header per header, named by a sed style replacement
  mocksmith -I include -d test/mocks -f 's/i(.*)\\.h/mock_\\1.h/' include/foo/*.h

  # Name mocks with a sed style replacement
  echo 'struct IFoo { virtual void f() = 0; };' | mocksmith -n 's/I(.*)/Fake\\1/'
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-I",
        "--include-dir",
        type=Path,
        action="append",
        default=[],
        help="Directory to add to the include search path. Also used to find the path "
        "to include the source headers with in generated mock headers",
    )
    parser.add_argument(
        "-n",
        "--name-mock",
        metavar="SED_REPLACEMENT",
        help="Sed style replacement converting class names to mock names, "
        "e.g. 's/I(.*)/Mock\\1/'",
    )
    parser.add_argument(
        "-f",
        "--name-output-file",
        metavar="SED_REPLACEMENT",
        help="Sed style replacement converting header file names to mock header file "
        "names (requires --output-dir)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "-o",
        "--output-file",
        type=Path,
        help="Write all mocks to this header file",
    )
    output.add_argument(
        "-d",
        "--output-dir",
        type=Path,
        help="Write one mock header per source header to this existing directory",
    )
    parser.add_argument(
        "-w",
        "--always-write",
        action="store_true",
        help="Write output files even if their content is unchanged",
    )
    parser.add_argument(
        "--std",
        choices=SUPPORTED_STANDARDS,
        help="C++ standard to parse the headers with (default: c++17)",
    )
    parser.add_argument(
        "--methods",
        choices=[strategy.value for strategy in MethodsToMockStrategy],
        default=None,
        help="Methods to mock: all non-static methods, all virtual methods or only "
        "pure virtual methods (default: virtual)",
    )
    parser.add_argument(
        "--class-filter",
        type=_class_filter,
        metavar="REGEX",
        help="Only mock classes whose name matches the regex",
    )
    parser.add_argument(
        "--clang-arg",
        action="append",
        default=[],
        metavar="ARG",
        help="Additional argument passed to clang, e.g. --clang-arg=-DFOO",
    )
    parser.add_argument(
        "--msvc-allow-deprecated",
        action="store_true",
        help="Add MSVC pragmas disabling warnings for overriding deprecated methods "
        "(only when writing header files)",
    )
    parser.add_argument(
        "--ignore-errors",
        action="store_true",
        help="Ignore C++ parse errors. Unknown types may show up as 'int' and "
        "declarations using them may be missing",
    )
    logging_group = parser.add_mutually_exclusive_group()
    logging_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug output (to stdout when writing files, else stderr)",
    )
    logging_group.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Disable all log output other than the reason for a failure",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write a debug log file to this directory",
    )
    parser.add_argument(
        "--parse-function-bodies",
        action="store_true",
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "source_files",
        type=Path,
        nargs="*",
        metavar="HEADER",
        help="Header files to mock",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and cross-check command line arguments."""
    parser = create_parser()
    args = parser.parse_args(argv)

    writes_files = args.output_file is not None or args.output_dir is not None
    if args.name_output_file is not None and args.output_dir is None:
        parser.error("the argument --output-dir is required when --name-output-file is used")
    if writes_files and not args.source_files:
        parser.error("header files are required when writing to an output file or directory")
    if args.msvc_allow_deprecated and not writes_files:
        parser.error("--msvc-allow-deprecated requires --output-file or --output-dir")
    return args


def create_options(args: argparse.Namespace, config: Config) -> GeneratorOptions:
    """Create generator options from command line arguments.

    Raises:
        InvalidSedReplacementError: If --name-mock is not a valid sed replacement
    """
    overrides = {
        "include_paths": tuple(config.include_dirs),
        "clang_args": tuple(args.clang_arg),
        "class_filter": args.class_filter,
        "msvc_allow_overriding_deprecated_methods": args.msvc_allow_deprecated,
    }
    if args.std is not None:
        overrides["cpp_standard"] = args.std
        overrides["simplified_nested_namespaces"] = uses_simplified_namespaces(args.std)
    if args.methods is not None:
        overrides["methods_to_mock"] = MethodsToMockStrategy.from_name(args.methods)
    if args.ignore_errors:
        overrides["ignore_errors"] = True
    if args.parse_function_bodies:
        overrides["parse_function_bodies"] = True
    if args.name_mock is not None:
        overrides["namer"] = SedReplacement.from_sed_replacement(args.name_mock)
    return GeneratorOptions.from_config(**overrides)


def output_file_namer(name_output_file: str | None) -> Callable[[MockHeader], str]:
    """Create the function naming mock headers written to the output directory.

    Raises:
        InvalidSedReplacementError: If the replacement string is invalid
    """
    if name_output_file is None:
        return default_name_output_file

    namer = SedReplacement.from_sed_replacement(name_output_file)

    def name(header: MockHeader) -> str:
        # Headers in the output directory are generated from one file each
        if len(header.source_files) != 1:
            raise MocksmithError(
                f"Cannot name a mock header generated from {len(header.source_files)} files"
            )
        return namer.name(header.source_files[0].name)

    return name


def write_header(file: Path, header: MockHeader, always_write: bool) -> None:
    """Write a mock header file.

    Raises:
        MocksmithError: If the file cannot be written
    """
    logger = get_logger(__name__)
    try:
        written = maybe_write_file(file, header.code, always_write)
    except OSError as e:
        raise MocksmithError(f"Failed to write mock header file {file}: {e}") from e
    if written:
        logger.info(f"Wrote {file} ({', '.join(header.mock_names)})")
    else:
        logger.info(f"{file} is up to date")


def run(args: argparse.Namespace, config: Config) -> None:
    """Generate mocks as requested by the command line.

    Raises:
        MocksmithError: If generating or writing mocks fails
    """
    logger = get_logger(__name__)
    options = create_options(args, config)
    name_output_file = output_file_namer(args.name_output_file)

    with Mocksmith(options) as mocksmith:
        if not args.source_files:
            content = sys.stdin.read()
            for mock in mocksmith.create_mocks_from_string(content):
                sys.stdout.write(mock.code)
        elif config.output_file is not None:
            header = mocksmith.create_mock_header_for_files(args.source_files)
            write_header(config.output_file, header, config.always_write)
        elif config.output_dir is not None:
            # Generate all headers before writing any, so a failure writes nothing
            headers = []
            for source_file in args.source_files:
                logger.debug(f"Creating mock header for {source_file}")
                headers.append(mocksmith.create_mock_header_for_files([source_file]))
            for header in headers:
                write_header(config.output_dir / name_output_file(header), header, config.always_write)
        else:
            for source_file in args.source_files:
                for mock in mocksmith.create_mocks_for_file(source_file):
                    sys.stdout.write(mock.code)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the mocksmith command line."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            include_dirs=args.include_dir,
            output_file=args.output_file,
            output_dir=args.output_dir,
            verbose=args.verbose or None,
            silent=args.silent or None,
            always_write=args.always_write or None,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Log to stdout unless stdout carries the mocks
    LoggerSetup.initialize(
        verbose=config.verbose,
        silent=config.silent,
        stream=sys.stdout if config.writes_files else sys.stderr,
        log_dir=config.log_dir,
    )
    logger = get_logger(__name__)
    logger.debug(f"Include directories: {[str(path) for path in config.include_dirs]}")

    try:
        run(args, config)
    except (MocksmithError, ValueError) as e:
        logger.debug("Mock generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()

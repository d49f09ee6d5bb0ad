"""
launch.py - Tag Cloud Generator Entry Point

Reads the configuration, asks for whatever was not given on the
command line, and writes the tag cloud.

Usage:
    python launch.py                                  # Prompt for everything
    python launch.py --input in.txt --output out.html --count 50
    python launch.py --config_file path               # Use custom config file
"""

import sys
from argparse import ArgumentParser
from configparser import ConfigParser
from configparser import Error as ConfigParserError

from tagcloud import TagCloudGenerator, parse_word_count
from tagcloud.errors import ConfigError, TagCloudError
from utils.config import Config


def _ask(value, prompt):
    if value is not None:
        return value
    return input(prompt).strip()


def build_parser():
    parser = ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a text file")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--input", type=str, default=None,
                        help="Input text file (prompted if omitted)")
    parser.add_argument("--output", type=str, default=None,
                        help="Output HTML file (prompted if omitted)")
    parser.add_argument("--count", type=str, default=None,
                        help="Number of words in the tag cloud (prompted if omitted)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        cparser = ConfigParser(interpolation=None)
        try:
            cparser.read(args.config_file)
        except ConfigParserError as e:
            raise ConfigError(f"cannot parse {args.config_file}: {e}") from e
        config = Config(cparser)

        input_path = _ask(args.input, "Enter an input file name: ")
        output_path = _ask(args.output, "Enter an output file name: ")
        num_words = parse_word_count(_ask(
            args.count,
            "Enter the number of words to be included in the tag cloud: "))

        result = TagCloudGenerator(config).generate(
            input_path, output_path, num_words)
        if result.notice:
            sys.stdout.write(f"{result.notice}\n")
        return 0

    except TagCloudError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    except EOFError:
        sys.stderr.write("Error: input ended before all values were entered.\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

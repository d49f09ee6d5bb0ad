import codecs
from configparser import Error as ConfigParserError

from tagcloud.errors import ConfigError
from tokenizer import SEPARATORS
from utils import LOG_DIR

STYLESHEET = ("http://web.cse.ohio-state.edu/software/2231/"
              "web-sw2/assignments/projects/tag-cloud-generator/data/tagcloud.css")
MIN_FONT_SIZE = 11
MAX_FONT_SIZE = 48


class Config(object):
    def __init__(self, config):
        try:
            self._read(config)
        except ConfigParserError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        self._frozen = True

    def _read(self, config):
        section = "TAGCLOUD"
        try:
            self.min_font_size = config.getint(
                section, "MIN_FONT_SIZE", fallback=MIN_FONT_SIZE)
            self.max_font_size = config.getint(
                section, "MAX_FONT_SIZE", fallback=MAX_FONT_SIZE)
        except ValueError as e:
            raise ConfigError(f"Font sizes must be integers: {e}") from e
        if self.min_font_size < 1:
            raise ConfigError("MIN_FONT_SIZE must be at least 1.")
        if self.min_font_size >= self.max_font_size:
            raise ConfigError("MIN_FONT_SIZE must be smaller than MAX_FONT_SIZE.")

        self.stylesheet = config.get(section, "STYLESHEET", fallback=STYLESHEET).strip()

        self.encoding = config.get(section, "ENCODING", fallback="utf-8").strip()
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"Unknown ENCODING: {self.encoding}") from e

        raw = config.get(section, "SEPARATORS", fallback=None)
        if raw is None:
            self.separators = SEPARATORS
        else:
            # INI values cannot hold a literal tab or newline.
            try:
                self.separators = frozenset(codecs.decode(raw, "unicode_escape"))
            except UnicodeError as e:
                raise ConfigError(f"Invalid escape in SEPARATORS: {raw}") from e
        if not self.separators:
            raise ConfigError("SEPARATORS must not be empty.")

        self.log_dir = config.get("LOGGING", "LOG_DIR", fallback=LOG_DIR).strip()

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"Config is read-only: cannot set {name}")
        super().__setattr__(name, value)

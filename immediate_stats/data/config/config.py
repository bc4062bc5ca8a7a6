# coding: utf-8

'''
Configuration file reader for Immediate Stats.

Only the derive (code generation) side has knobs right now:

  derive:
    stat-type-token: Stat          # field type name substring marking a stat
    empty-container: warn          # warn | error | ignore
    redundant-stat-warning: true   # warn about STAT on an already-stat field
'''

# -----------------------------------------------------------------------------
# Imports
# -----------------------------------------------------------------------------

from typing import Optional, Union, Any, Mapping, Dict

import enum
import pathlib

import yaml

from immediate_stats.logger          import log
from immediate_stats.base.exceptions import ConfigError


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

THIS_DIR = pathlib.Path(__file__).resolve().parent
DEFAULT_NAME = 'config.immediate-stats.yaml'


@enum.unique
class EmptyPolicy(enum.Enum):
    '''
    What to do when a `@stat_container` type has no stat fields at all.
    '''

    WARN = 'warn'
    '''Generate a no-op reset and log a warning.'''

    ERROR = 'error'
    '''Refuse to generate; raise a DeriveError.'''

    IGNORE = 'ignore'
    '''Generate a no-op reset silently.'''


_DEFAULTS: Dict[str, Any] = {
    'derive': {
        'stat-type-token': 'Stat',
        'empty-container': EmptyPolicy.WARN.value,
        'redundant-stat-warning': True,
    },
}
'''
Values used for any key the config document doesn't have.
'''


# -----------------------------------------------------------------------------
# Code
# -----------------------------------------------------------------------------

def default_path() -> Optional[pathlib.Path]:
    '''Returns absolute path to the DEFAULT config file.

    Returns None if file does not exist.

    '''
    path = THIS_DIR / DEFAULT_NAME
    if not path.exists():
        return None
    return path


class Configuration:
    '''Config data for how Immediate Stats generates and runs.'''

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def _define_vars(self) -> None:
        '''
        Instance variable definitions, type hinting, doc strings, etc.
        '''

        self._path: Optional[pathlib.Path] = None
        '''
        Path to our config file. None if created from data.
        '''

        self._config: Dict[Any, Any] = {}
        '''
        Our storage of the config data itself.
        '''

    def __init__(self,
                 path: Union[pathlib.Path, str, None] = None,
                 data: Optional[Mapping[str, Any]]    = None) -> None:
        '''
        Create a Configuration object.

        `data`, if given, is used as the config document directly and no file
        is read.

        Otherwise `path` (or `default_path()` if no `path`) is loaded as a
        YAML document.

        Raises a ConfigError if the document can't be loaded or has
        invalid values.
        '''
        self._define_vars()

        if data is not None:
            self._config = self._load_doc(data, '<data>')

        else:
            self._path = pathlib.Path(path) if path else default_path()
            if not self._path:
                raise log.exception(
                    ConfigError,
                    "No config file path given and default config "
                    "'{}' does not exist in: {}",
                    DEFAULT_NAME, THIS_DIR)
            self._config = self._load(self._path)

        self._validate()

    def _load(self, path: pathlib.Path) -> Dict[Any, Any]:
        '''
        Read and parse the YAML document at `path`.
        '''
        try:
            with path.open('r', encoding='utf-8') as file_stream:
                document = yaml.safe_load(file_stream)

        except OSError as error:
            raise log.exception(
                ConfigError,
                "Could not read config file: {}",
                path) from error

        except yaml.YAMLError as error:
            raise log.exception(
                ConfigError,
                "Could not parse config file as YAML: {}",
                path) from error

        log.debug("Loaded config file: {}", path)
        return self._load_doc(document, path)

    def _load_doc(self,
                  document: Any,
                  source:   Union[pathlib.Path, str]) -> Dict[Any, Any]:
        '''
        Make sure `document` is something we can use as config data.
        '''
        # An empty file is just "use all the defaults".
        if document is None:
            return {}

        if not isinstance(document, Mapping):
            raise log.exception(
                ConfigError,
                "Config document must be a mapping; got {} from: {}",
                type(document).__name__, source)

        return dict(document)

    def _validate(self) -> None:
        '''
        Check the values we actually use, so bad config fails at load instead
        of later in the middle of decorating some class.
        '''
        token = self.get('derive', 'stat-type-token')
        if not isinstance(token, str) or not token:
            raise log.exception(
                ConfigError,
                "'derive.stat-type-token' must be a non-empty string. "
                "Got: {}",
                token)

        policy = self.get('derive', 'empty-container')
        try:
            EmptyPolicy(policy)
        except ValueError as error:
            raise log.exception(
                ConfigError,
                "'derive.empty-container' must be one of: {}. Got: {}",
                [each.value for each in EmptyPolicy], policy) from error

        redundant = self.get('derive', 'redundant-stat-warning')
        if not isinstance(redundant, bool):
            raise log.exception(
                ConfigError,
                "'derive.redundant-stat-warning' must be true or false. "
                "Got: {}",
                redundant)

    # -------------------------------------------------------------------------
    # Config Data
    # -------------------------------------------------------------------------

    @property
    def path(self) -> Optional[pathlib.Path]:
        return self._path

    def get(self, *keychain: str) -> Optional[Any]:
        '''
        Get a configuration thingy from us given some keychain used to walk
        into our config data.

        Returns data found at end of keychain, or the default value if our
        document doesn't have it.
        Returns None if neither has it.
        '''
        data = _walk(self._config, keychain)
        if data is None:
            data = _walk(_DEFAULTS, keychain)
        return data

    @property
    def stat_type_token(self) -> str:
        '''
        Substring of a field's type name that marks it as a stat.
        '''
        return self.get('derive', 'stat-type-token')

    @property
    def empty_container(self) -> EmptyPolicy:
        '''
        Policy for `@stat_container` types without any stat fields.
        '''
        return EmptyPolicy(self.get('derive', 'empty-container'))

    @property
    def redundant_stat_warning(self) -> bool:
        '''
        Whether to warn about STAT markers on fields that are already stats.
        '''
        return self.get('derive', 'redundant-stat-warning')

    # -------------------------------------------------------------------------
    # Python Functions
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}("
                f"path={self._path!r}, "
                f"config={self._config!r})")


def _walk(data: Any, keychain) -> Optional[Any]:
    for key in keychain:
        if not isinstance(data, Mapping):
            return None
        data = data.get(key, None)
        if data is None:
            return None
    return data


# -----------------------------------------------------------------------------
# Current Configuration
# -----------------------------------------------------------------------------

_CONFIG: Optional[Configuration] = None
'''
The configuration the derive uses when none is passed in explicitly. Loaded
from the default file on first use.
'''


def configuration() -> Configuration:
    '''
    Returns the current configuration, loading the default one if needed.
    '''
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = Configuration()
    return _CONFIG


def set_configuration(config: Configuration) -> None:
    '''
    Replace the current configuration.
    '''
    global _CONFIG
    if not isinstance(config, Configuration):
        raise log.exception(
            ConfigError,
            "Expected a Configuration, got: {}",
            type(config).__name__)
    _CONFIG = config


def reset_configuration() -> None:
    '''
    Drop the current configuration; the default will be reloaded on next use.
    '''
    global _CONFIG
    _CONFIG = None

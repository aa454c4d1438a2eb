from emojiregistry.const import EmojiLabel
from emojiregistry.const import EmojiRole
from emojiregistry.const import Status
from emojiregistry.exceptions import RegistryUnavailableError
from emojiregistry.index import EmojiIndex
from emojiregistry.index import LabeledEmojis
from emojiregistry.index import Registry
from emojiregistry.loader import EmojiLoader
from emojiregistry.loader import load
from emojiregistry.structs import Emoji
from emojiregistry.structs import LoaderOptions

__version__ = '1.0.0'

__all__ = [
    'Emoji',
    'EmojiIndex',
    'EmojiLabel',
    'EmojiLoader',
    'EmojiRole',
    'LabeledEmojis',
    'LoaderOptions',
    'Registry',
    'RegistryUnavailableError',
    'Status',
    'load',
]

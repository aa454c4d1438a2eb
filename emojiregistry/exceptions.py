# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only


class EmojiRegistryError(Exception):
    '''
    Base class for all errors raised by the registry
    '''

    def __init__(self, text: str = '') -> None:
        Exception.__init__(self)
        self.text = text

    def __str__(self) -> str:
        return self.text


class RegistryUnavailableError(EmojiRegistryError):
    '''
    The registry text could not be obtained or decoded
    '''


class LoadCancelledError(EmojiRegistryError):
    pass


class LoadInProgressError(EmojiRegistryError):
    pass

# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

# Providers for the registry text. Every provider raises
# RegistryUnavailableError when the text can not be obtained.

from __future__ import annotations

import logging
from pathlib import Path

from emojiregistry.exceptions import RegistryUnavailableError

log = logging.getLogger('emojiregistry.sources')

DEFAULT_RESOURCE_PATH = '/org/emojiregistry/emoji-test.txt'


def read_file(path: str | Path) -> str:
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as error:
        raise RegistryUnavailableError(
            f'Unable to read registry file {path}: {error}') from error

    log.info('Read registry file %s', path)
    return text


def read_resource(resource_path: str = DEFAULT_RESOURCE_PATH,
                  bundle: str | Path | None = None
                  ) -> str:
    '''
    Reads the registry out of a GResource. If a bundle file is given it is
    registered first, some distributions ship resource files without
    registering them.
    '''
    try:
        from gi.repository import Gio
        from gi.repository import GLib
    except ImportError as error:
        raise RegistryUnavailableError(
            'PyGObject is required to read resources') from error

    if bundle is not None:
        try:
            res = Gio.resource_load(str(bundle))
        except GLib.Error as error:
            raise RegistryUnavailableError(
                f'Unable to load resource bundle {bundle}: '
                f'{error.message}') from error
        Gio.resources_register(res)

    try:
        bytes_ = Gio.resources_lookup_data(resource_path,
                                           Gio.ResourceLookupFlags.NONE)
    except GLib.Error as error:
        raise RegistryUnavailableError(
            f'Unable to look up resource {resource_path}: '
            f'{error.message}') from error

    data = bytes_.get_data()
    assert data is not None
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as error:
        raise RegistryUnavailableError(
            f'Resource {resource_path} is not valid UTF-8') from error

    log.info('Loaded registry resource %s', resource_path)
    return text

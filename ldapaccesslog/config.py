# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2017 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

import os
import configparser
from ldapaccesslog._constants import DSACCESSLOGRC_HOME, DSACCESSLOGRC_SECTION
from ldapaccesslog.summary import DEFAULT_TOP


def default_config():
    return {
        'skip_invalid': True,
        'json': False,
        'verbose': False,
        'top': DEFAULT_TOP,
    }


def _read_config(path, log):
    path = os.path.expanduser(path)
    log.debug("config path: %s" % path)
    config = configparser.ConfigParser()
    try:
        config.read([path])
    except configparser.Error as e:
        raise ValueError("%s %s" % (path, e))
    log.debug("config sections: %s" % config.sections())
    return config


def config_to_settings(path, log):
    """
    Given a path to a file, return the tool settings.

    A missing file or section gives the defaults. The file should be an
    ini file with the content:

    [accesslog]
    skip_invalid = [true, false]
    json = [true, false]
    verbose = [true, false]
    top = 10
    """
    if path is None:
        path = DSACCESSLOGRC_HOME
    settings = default_config()
    config = _read_config(path, log)
    section = DSACCESSLOGRC_SECTION

    if not config.has_section(section):
        log.debug("config no such section: %s" % section)
        return settings

    try:
        settings['skip_invalid'] = config.getboolean(section, 'skip_invalid', fallback=True)
        settings['json'] = config.getboolean(section, 'json', fallback=False)
        settings['verbose'] = config.getboolean(section, 'verbose', fallback=False)
        settings['top'] = config.getint(section, 'top', fallback=DEFAULT_TOP)
    except ValueError as e:
        raise ValueError("%s [%s] %s" % (path, section, e))

    if settings['top'] < 1:
        raise ValueError("%s [%s] top must be a positive number" % (path, section))

    return settings


def config_arg_concat(args, settings):
    """
    Overlay the command line arguments on top of the settings from the
    config file. Only options that were actually given on the command
    line win.
    """
    if getattr(args, 'json', False):
        settings['json'] = True
    if getattr(args, 'verbose', False):
        settings['verbose'] = True
    skip_invalid = getattr(args, 'skip_invalid', None)
    if skip_invalid is not None:
        settings['skip_invalid'] = skip_invalid
    top = getattr(args, 'top', None)
    if top is not None:
        settings['top'] = top
    return settings

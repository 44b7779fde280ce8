# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2017 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""ds-accesslog, parse and summarize directory server access logs.

    ds-accesslog parse /var/log/ds/access
    ds-accesslog --json summarize /var/log/ds/access /var/log/ds/access.1.gz
"""

import argparse
import argcomplete
import json
import logging
import sys
from ldapaccesslog.cli_base import CustomHelpFormatter, setup_script_logger
from ldapaccesslog.config import config_to_settings, config_arg_concat
from ldapaccesslog.exceptions import LogException
from ldapaccesslog.linesource import StreamLineSource
from ldapaccesslog.reader import AccessLogReader
from ldapaccesslog.summary import AccessLogSummary

STDIN_PATH = '-'


class ToolResult(object):
    """What happened while processing the files given on the command line"""

    def __init__(self):
        self.messages = 0
        self.invalid_lines = 0
        self.failed_files = []

    @property
    def ok(self):
        return len(self.failed_files) == 0


def _open_reader(path):
    if path == STDIN_PATH:
        return AccessLogReader(StreamLineSource(sys.stdin, close_stream=False))
    return AccessLogReader(path)


def _process_files(log, paths, settings, callback):
    """Feed every message of every file to callback. Invalid lines are
    logged and skipped, unless skip_invalid is off, in which case the
    file is abandoned at the first one.
    """
    result = ToolResult()
    for path in paths:
        try:
            reader = _open_reader(path)
        except OSError as e:
            log.error("Unable to open %s: %s" % (path, e))
            result.failed_files.append(path)
            continue

        with reader:
            while True:
                try:
                    message = reader.read()
                except LogException as e:
                    result.invalid_lines += 1
                    if settings['skip_invalid']:
                        log.debug("%s: skipping invalid line: %s" % (path, e))
                        continue
                    log.error("%s: %s" % (path, e))
                    result.failed_files.append(path)
                    break
                except (OSError, UnicodeDecodeError) as e:
                    log.error("Error reading %s: %s" % (path, e))
                    result.failed_files.append(path)
                    break
                if message is None:
                    break
                result.messages += 1
                callback(message)
    return result


def _describe(message):
    ids = []
    for name in ('conn', 'op', 'msgID'):
        value = message.get_named_values().get(name)
        if value is not None:
            ids.append("%s=%s" % (name, value))
    return "%s %s %s" % (message.get_timestamp().isoformat(),
                         ' '.join(message.get_unnamed_values()),
                         ' '.join(ids))


def parse_log(log, args, settings):
    """Print every message of the logs"""

    def _print_message(message):
        if settings['json']:
            log.info(json.dumps(message.to_dict()))
        else:
            log.info(_describe(message).rstrip())

    result = _process_files(log, args.files, settings, _print_message)
    log.debug("Parsed %d messages, %d invalid lines" % (result.messages, result.invalid_lines))
    return result


def _format_counts(log, title, items):
    if len(items) == 0:
        return
    log.info("\n" + title)
    log.info('-' * 80)
    for item in items:
        log.info("%-60s %d" % (item['name'], item['count']))


def _format_report(log, report):
    log.info("Messages examined:     %d" % report['total_messages'])
    log.info("Invalid lines:         %d" % report['invalid_lines'])
    if report['first_timestamp'] is not None:
        log.info("First message:         %s" % report['first_timestamp'])
        log.info("Last message:          %s" % report['last_timestamp'])
        log.info("Duration (seconds):    %s" % report['duration'])
    log.info("Connections:           %d" % report['connects'])
    log.info("Disconnects:           %d" % report['disconnects'])

    _format_counts(log, "Most common client addresses", report['client_addresses'])
    _format_counts(log, "Most common client connection policies", report['client_connection_policies'])
    _format_counts(log, "Most common disconnect reasons", report['disconnect_reasons'])
    _format_counts(log, "Security protocols", report['security_protocols'])

    for op, stats in report['operations'].items():
        log.info("\n%s operations: %d" % (op, stats['count']))
        log.info('-' * 80)
        if stats['average_etime'] is not None:
            log.info("Average processing time (ms):  %.3f" % stats['average_etime'])
        if stats['uncached']:
            log.info("Accessed uncached data:        %d" % stats['uncached'])
        for item in stats['result_codes']:
            log.info("  result %-51s %d" % (item['name'], item['count']))

    _format_counts(log, "Search scopes", report['search_scopes'])
    unindexed = report['unindexed_searches']
    if unindexed['attempts']:
        log.info("\nUnindexed searches:    %d (%d successful, %d failed)" %
                 (unindexed['attempts'], unindexed['successful'], unindexed['failed']))
    _format_counts(log, "Most common search entry counts", report['search_entry_counts'])
    _format_counts(log, "Most common extended operations", report['extended_operations'])


def summarize_log(log, args, settings):
    """Count what happened in the logs and print a report"""
    summary = AccessLogSummary(top=settings['top'])

    result = _process_files(log, args.files, settings, summary.update)
    summary.invalid_lines = result.invalid_lines
    report = summary.get_report()
    if settings['json']:
        log.info(json.dumps(report, indent=4))
    else:
        _format_report(log, report)
    return result


def create_parser():
    parser = argparse.ArgumentParser(
        prog='ds-accesslog',
        description='Parse and summarize directory server access logs',
        formatter_class=CustomHelpFormatter
    )
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        help="Display verbose operation tracing during command execution")
    parser.add_argument('-j', '--json', action='store_true', default=False,
                        help="Return result in JSON object")
    parser.add_argument('-c', '--config', default=None,
                        help="Path to the configuration file, defaults to ~/.dsaccesslogrc")
    invalid_group = parser.add_mutually_exclusive_group()
    invalid_group.add_argument('--skip-invalid', dest='skip_invalid', action='store_const',
                               const=True, default=None,
                               help="Log and skip lines that can not be parsed")
    invalid_group.add_argument('--abort-on-invalid', dest='skip_invalid', action='store_const',
                               const=False,
                               help="Stop processing a file at the first line that can not be parsed")

    subparsers = parser.add_subparsers(help="action")

    parse_parser = subparsers.add_parser('parse', help="Print every message of the access logs",
                                         formatter_class=CustomHelpFormatter)
    parse_parser.add_argument('files', nargs='+',
                              help="Access log files, '-' reads from standard input")
    parse_parser.set_defaults(func=parse_log)

    summarize_parser = subparsers.add_parser('summarize', help="Summarize the content of access logs",
                                             formatter_class=CustomHelpFormatter)
    summarize_parser.add_argument('files', nargs='+',
                                  help="Access log files, '-' reads from standard input")
    summarize_parser.add_argument('-t', '--top', type=int, default=None,
                                  help="Number of entries in the most common lists")
    summarize_parser.set_defaults(func=summarize_log)

    return parser


def main(argv=None):
    parser = create_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    log = setup_script_logger('ds-accesslog', args.verbose)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        settings = config_arg_concat(args, config_to_settings(args.config, log))
    except ValueError as e:
        log.error("Invalid configuration: %s" % e)
        return 1
    if settings['verbose']:
        log.setLevel(logging.DEBUG)

    result = args.func(log, args, settings)
    if not result.ok:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

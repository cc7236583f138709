#!/usr/bin/env python3

"""
Command line front end for the Dependency Analyzer: a scripted demo, an
interactive line-based shell, and the HTTP server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TextIO

from config import settings
from engine.exceptions import CommandError
from services.analyzer_service import DependencyAnalyzerService
from services.sample_data import load_sample_dataset

log = logging.getLogger(__name__)

HELP_TEXT = "\n".join([
    "Commands:",
    "  add <source> <target> <latency> - Add a dependency",
    "  process                         - Process all queued events",
    "  reachable <service>             - Get reachable services from a service",
    "  services                        - List all services",
    "  queue                           - Show queue status",
    "  demo                            - Load demo dataset",
    "  clear                           - Clear the graph",
    "  help                            - Show this help",
    "  quit                            - Exit",
])


def _fmt(services: Iterable[str]) -> str:
    return "[" + ", ".join(sorted(services)) + "]"


def run_demo(analyzer: DependencyAnalyzerService, probes: Optional[Sequence[str]] = None) -> List[str]:
    lines = ["=== Dependency Analyzer Demo ===", "", "Loading sample dataset..."]
    load_sample_dataset(analyzer)

    lines.append("Processing events from the queue...")
    analyzer.process_all_queued_events()
    lines.append(f"Processed {analyzer.get_processed_event_count()} events")
    lines.append("")
    lines.append(f"All services in the graph: {_fmt(analyzer.get_all_services())}")
    lines.append("")
    lines.append("=== Reachable services ===")

    for service in probes if probes is not None else settings.demo_probe_services:
        if analyzer.has_service(service):
            lines.append(f"Reachable services from '{service}': {_fmt(analyzer.get_reachable_services(service))}")
        else:
            lines.append(f"Service '{service}' not found in graph")
    return lines


class Shell:
    """Line-based command interpreter over a :class:`DependencyAnalyzerService`.

    :meth:`execute` handles a single line and returns the text to print, which
    keeps the command handling testable without a terminal.
    """

    prompt = "> "

    def __init__(self, analyzer: DependencyAnalyzerService) -> None:
        self.analyzer = analyzer
        self.running = True
        self._commands: Dict[str, Callable[[List[str]], str]] = {
            "add": self._add,
            "process": self._process,
            "reachable": self._reachable,
            "services": self._services,
            "queue": self._queue,
            "demo": self._demo,
            "clear": self._clear,
            "help": self._help,
            "quit": self._quit,
            "exit": self._quit,
        }

    def execute(self, line: str) -> str:
        parts = line.split()
        if not parts:
            return ""
        command, args = parts[0].lower(), parts[1:]
        log.debug("Shell command %s %s", command, args)
        handler = self._commands.get(command)
        if handler is None:
            return f"Unknown command: {command}"
        try:
            return handler(args)
        except CommandError as exc:
            return str(exc)

    def run(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
        print("=== Dependency Analyzer Interactive Mode ===", file=stdout)
        print(HELP_TEXT, file=stdout)
        print(file=stdout)
        while self.running:
            stdout.write(self.prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                break
            output = self.execute(line.strip())
            if output:
                print(output, file=stdout)

    def _add(self, args: List[str]) -> str:
        if len(args) != 3:
            raise CommandError("Usage: add <source> <target> <latency>")
        source, target, raw_latency = args
        try:
            latency = int(raw_latency)
        except ValueError:
            raise CommandError("Invalid number format") from None
        self.analyzer.publish_dependency_event(source, target, latency)
        return "Event published to queue"

    def _process(self, args: List[str]) -> str:
        processed = self.analyzer.process_all_queued_events()
        return f"Processed {processed} events"

    def _reachable(self, args: List[str]) -> str:
        if len(args) != 1:
            raise CommandError("Usage: reachable <service>")
        service = args[0]
        if not self.analyzer.has_service(service):
            return f"Service '{service}' not found"
        return f"Reachable from {service}: {_fmt(self.analyzer.get_reachable_services(service))}"

    def _services(self, args: List[str]) -> str:
        return f"All services: {_fmt(self.analyzer.get_all_services())}"

    def _queue(self, args: List[str]) -> str:
        return (
            f"Queue size: {self.analyzer.get_queue_size()}\n"
            f"Total processed: {self.analyzer.get_processed_event_count()}"
        )

    def _demo(self, args: List[str]) -> str:
        load_sample_dataset(self.analyzer)
        return "Demo dataset loaded into queue"

    def _clear(self, args: List[str]) -> str:
        self.analyzer.clear_graph()
        return "Graph cleared"

    def _help(self, args: List[str]) -> str:
        return HELP_TEXT

    def _quit(self, args: List[str]) -> str:
        self.running = False
        return "Goodbye!"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="depanalyzer", description="Service dependency analyzer")
    parser.add_argument("--log-level", default=None, help="log level for the demo and shell (default WARNING)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("demo", help="run the sample dataset and print reachability")
    sub.add_parser("shell", help="start the interactive shell (default)")

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    from main import configure_logging

    if args.command == "serve":
        from main import serve
        configure_logging(args.log_level)
        serve(host=args.host, port=args.port)
        return 0

    # keep log lines out of the demo and shell output unless asked for
    configure_logging(args.log_level or "WARNING")

    if args.command == "demo":
        for line in run_demo(DependencyAnalyzerService()):
            print(line)
        return 0

    Shell(DependencyAnalyzerService()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

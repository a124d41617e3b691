#!/usr/bin/env python3
"""
webinclude - Recursive remote include preprocessor

Expands {{#webinclude <url> [<span>]}} directives in a tree of text
documents, splicing in line ranges or anchored blocks of remote files.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directive syntax:
    {{#webinclude https://host/file.rs}}          whole file
    {{#webinclude https://host/file.rs 5}}        line 5
    {{#webinclude https://host/file.rs 2:4}}      lines 2 to 4
    {{#webinclude https://host/file.rs :3}}       lines 1 to 3
    {{#webinclude https://host/file.rs 2:}}       line 2 to end
    {{#webinclude https://host/file.rs setup}}    ANCHOR: setup block
    \\{{#webinclude https://host/file.rs}}         literal, not expanded

Usage:
    webinclude inputdir/ outputdir/ [--pattern '**/*.md']

    Every document matching the pattern is expanded and written to the same
    relative path under outputdir.

Examples:
    # Expand all markdown under docs/
    webinclude docs/ build/

    # Headers from book.toml plus an extra token
    webinclude docs/ build/ --config book.toml --header "Authorization=token abc"

    # Verbose output
    webinclude docs/ build/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import Expander, __version__, LOG, state_connectToLogger
from .lib.errors import WebIncludeError
from .lib.headers import headers_load
from .config import appsettings
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                _     _            _           _
 __      _____ | |__ (_)_ __   ___| |_   _  __| | ___
 \ \ /\ / / _ \| '_ \| | '_ \ / __| | | | |/ _` |/ _ \
  \ V  V /  __/| |_) | | | | | (__| | |_| | (_| |  __/
   \_/\_/ \___||_.__/|_|_| |_|\___|_|\__,_|\__,_|\___|

  Recursive remote include preprocessor
"""

# Define CLI arguments
parser = ArgumentParser(
    description="webinclude - expand {{#webinclude}} directives with remote file content",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default="**/*.md",
    type=str,
    help="Glob (relative to inputdir) selecting the documents to expand",
)

parser.add_argument(
    "--config",
    default=None,
    type=str,
    help="Book configuration with [preprocessor.webinclude.headers] "
    "(relative to inputdir). Defaults to book.toml if present",
)

parser.add_argument(
    "--header",
    action="append",
    default=None,
    type=str,
    help="Extra request header as NAME=VALUE (can be repeated)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and collect the documents to expand.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - configFile: Resolved book configuration, or None
            - documents: Matching document paths (sorted)
            - envOK: True if environment is valid

    Exits:
        1 if the input directory or an explicit --config is missing
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    if state.config:
        config_file = state.inputdir / state.config
        if not config_file.is_file():
            print(f"Error: Config file not found: {config_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.configFile = config_file
    else:
        default_config = state.inputdir / appsettings.config_file
        state.configFile = default_config if default_config.is_file() else None

    LOG(f"Config file: {state.configFile}", level=2)

    state.documents = sorted(p for p in state.inputdir.glob(state.pattern) if p.is_file())
    LOG(f"Found {len(state.documents)} document(s) matching {state.pattern}", level=1)

    state.envOK = True
    return state


def headers_resolve(inputstate: ProgramState) -> ProgramState:
    """
    Build the header table shared by every fetch of the run.

    Args:
        inputstate: Program state with configFile resolved

    Returns:
        ProgramState with added field:
            - headers: Header name -> value

    Exits:
        1 if the configuration cannot be read or an override is malformed
    """

    state = inputstate.copy()

    try:
        state.headers = headers_load(state.configFile, state.header or ())
    except WebIncludeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Using {len(state.headers)} request header(s)", level=2)
    return state


def documents_expand(inputstate: ProgramState) -> ProgramState:
    """
    Expand every document and write it under outputdir.

    Each document is one content unit: expanded from depth 0 with the
    run's header table.

    Args:
        inputstate: Program state with documents and headers

    Returns:
        ProgramState with added field:
            - expandResult: Dict with documents, resolved, escaped,
              failed and depth_exceeded counts

    Exits:
        1 if a document cannot be read or written, or a malformed URL is
        found in strict mode
    """

    state = inputstate.copy()
    expander = Expander(headers=state.headers)

    for document in state.documents:
        relative = document.relative_to(state.inputdir)
        LOG(f"Expanding {relative}", level=2)
        try:
            source = document.read_text(encoding="utf-8")
            expanded = expander.expand(source)
            target = state.outputdir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(expanded, encoding="utf-8")
        except (OSError, UnicodeDecodeError, WebIncludeError) as e:
            print(f"Error expanding {relative}: {e}", file=sys.stderr)
            sys.exit(1)

    state.expandResult = {"documents": len(state.documents), **expander.counters}
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display expansion results to user.

    Args:
        inputstate: Program state with expandResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if expandResult is None
    """
    state: ProgramState = inputstate.copy()
    if state.expandResult is None:
        print("Error: Expansion failed", file=sys.stderr)
        sys.exit(1)

    result = state.expandResult
    LOG("\n✓ Expansion complete", level=1)
    LOG(f"  Documents: {result['documents']}", level=1)
    LOG(f"  Included:  {result['resolved']}", level=1)
    LOG(f"  Escaped:   {result['escaped']}", level=1)
    if result["failed"]:
        LOG(f"  Failed:    {result['failed']} (left in place)", level=1)
    if result["depth_exceeded"]:
        LOG(f"  Depth cap: {result['depth_exceeded']} (check for cyclic includes)", level=1)
    LOG(f"  Output:    {state.outputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="webinclude - Recursive remote include preprocessor",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - expand webinclude directives from inputdir to outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths and collect documents
        2. headers_resolve: Build the shared header table
        3. documents_expand: Expand each document
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing source documents
        outputdir: Directory where expanded documents are written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, headers_resolve, documents_expand, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature

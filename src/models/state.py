"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the expansion pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, config, header
        - env_check: configFile, documents, envOK
        - headers_resolve: headers
        - documents_expand: expandResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the documents to expand
        outputdir: Base output directory for expanded documents
        verbosity: Logging verbosity level (1-3)
        pattern: Glob (relative to inputdir) selecting the documents
        config: Optional book configuration file (relative to inputdir)
        header: NAME=VALUE header overrides from the command line
        envOK: Environment validation passed
        configFile: Resolved book configuration path, if any
        documents: Resolved document paths, one per content unit
        headers: Header table shared by every fetch of the run
        expandResult: Expansion results (documents, resolved, failed, ...)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="**/*.md")
    config: Optional[str] = field(default=None)
    header: Optional[List[str]] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    configFile: Optional[Path] = field(default=None)
    documents: List[Path] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    expandResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the expansion pipeline.

        Args:
            options: Parsed CLI arguments (pattern, config, header, etc.)
            inputdir: Directory containing source documents
            outputdir: Directory for expanded output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Only keep options that exist in ProgramState
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            headers_resolve,
            documents_expand,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)

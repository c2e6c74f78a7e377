"""
Command catalog for Text Processor.

This module maps the user-facing commands (case conversion, cleanup,
reversal, sorting) to their processors and runs them against a
TextProcessorContext.
"""

from functools import partial
from typing import TYPE_CHECKING, List, Dict, Tuple, Any

if TYPE_CHECKING:
    from .context import TextProcessorContext, ProcessingStep


def create_processing_pipeline() -> List['ProcessingStep']:
    """
    Create the command catalog in display order.

    Groups:
    - case     - upper, lower, title and sentence case
    - cleanup  - whitespace normalization and duplicate line removal
    - reverse  - reverse by letters, words or lines
    - sort     - natural line sort A→Z / Z→A

    Success messages are format templates receiving the processed context
    as ``ctx``.
    """
    from .context import ProcessingStep
    from .processors.case import convert_case
    from .processors.whitespace import remove_extra_spaces
    from .processors.duplicates import remove_duplicate_lines
    from .processors.reverse import reverse_content
    from .processors.sort import sort_content

    steps = [
        ProcessingStep(
            name=f'case_{kind}',
            processor=partial(convert_case, kind=kind),
            description=f'{kind.capitalize()} Case',
            group='case',
            success_message=f'Text converted to {kind} case!'
        )
        for kind in ('upper', 'lower', 'title', 'sentence')
    ]

    steps += [
        ProcessingStep(
            name='clean_whitespace',
            processor=remove_extra_spaces,
            description='Remove Extra Spaces',
            group='cleanup',
            success_message='Extra spaces removed!'
        ),
        ProcessingStep(
            name='remove_duplicates',
            processor=remove_duplicate_lines,
            description='Remove Duplicate Lines',
            group='cleanup',
            success_message='Removed {ctx.removed_duplicates} duplicate line(s)!'
        ),
    ]

    steps += [
        ProcessingStep(
            name=f'reverse_{kind}',
            processor=partial(reverse_content, kind=kind),
            description=f'Reverse {kind.capitalize()}',
            group='reverse',
            success_message=f'Text reversed by {kind}!'
        )
        for kind in ('letters', 'words', 'lines')
    ]

    steps += [
        ProcessingStep(
            name='sort_asc',
            processor=partial(sort_content, order='ascending'),
            description='Sort A→Z',
            group='sort',
            success_message='Text sorted A→Z!'
        ),
        ProcessingStep(
            name='sort_desc',
            processor=partial(sort_content, order='descending'),
            description='Sort Z→A',
            group='sort',
            success_message='Text sorted Z→A!'
        ),
    ]

    return steps


def get_step(name: str) -> 'ProcessingStep':
    """
    Look up a command by name.

    Raises:
        KeyError: If no command has that name
    """
    for step in create_processing_pipeline():
        if step.name == name:
            return step
    raise KeyError(f"Unknown command: {name}")


def run_command(ctx: 'TextProcessorContext', name: str) -> Tuple['TextProcessorContext', str]:
    """
    Run a single command against the context.

    Args:
        ctx: TextProcessorContext to process
        name: Command name from the catalog

    Returns:
        Tuple of the updated context and the user-facing success message
    """
    from .logging import log_message

    step = get_step(name)
    log_message(f"Starting {step.description}...")
    ctx = step.processor(ctx)
    message = step.success_message.format(ctx=ctx)
    log_message(f"Finished {step.description}: {message}")
    return ctx, message


def get_available_processors() -> List[Dict[str, Any]]:
    """
    Get list of available commands with their metadata.

    Returns:
        List of command dictionaries with name, description and group
    """
    pipeline = create_processing_pipeline()

    return [
        {
            'name': step.name,
            'description': step.description,
            'group': step.group,
        }
        for step in pipeline
    ]

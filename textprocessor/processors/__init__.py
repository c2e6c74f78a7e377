"""
Text transformation modules for Text Processor.

Each module exposes a pure function operating on a string and a thin
processor that applies it to a TextProcessorContext for the command catalog.
"""

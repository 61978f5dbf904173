"""Core reflow pipeline and intermediate representation modules.

WHY: The core package contains the stable heart of the filter: the IR
dataclasses and the segment / tokenize / measure / wrap stages. These are
consumed by the formatters, the CLI and the HTTP service.

HOW: ir.py defines the data structures, segmenter.py and tokenizer.py
build them from text, measure.py counts widths, wrapper.py packs lines,
and reflow.py wires the stages together.

RULES:
- IR dataclasses are the contract; change with care
- Every stage takes max_width (and policy flags) as explicit arguments
- Width is measured in codepoints on decoded text, never in bytes
"""

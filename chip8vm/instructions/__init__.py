"""CHIP-8 instruction handlers grouped by opcode family.

Every handler takes ``(state, instruction, framebuffer, keypad)`` and
returns the new interpreter state.
"""

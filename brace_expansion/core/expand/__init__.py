"""Brace expansion engine.

Sequences and comma lists are expanded recursively, left group first, with the
text after each group expanded before it is combined with the group's members.
"""

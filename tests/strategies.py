"""Shared hypothesis strategies for Strata property-based testing.

- **Section text**: captured chunks with and without the ``@parent`` marker
- **Nesting**: stacks of (before, after) text pairs for nested capture frames
"""

from __future__ import annotations

from hypothesis import strategies as st

# Arbitrary captured text (may contain the marker)
section_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    max_size=80,
)

# Captured text that cannot contain the marker
plain_text = section_text.filter(lambda s: "@" not in s)

section_name = st.from_regex(r"[a-z_][a-z0-9_]{0,12}", fullmatch=True)

# (before, after) pairs, outermost frame first
nested_frames = st.lists(st.tuples(plain_text, plain_text), min_size=1, max_size=6)

"""Hypothesis strategies for property-based testing of maybe-result types."""

from hypothesis import strategies as st

# Basic value strategies
integers = st.integers(min_value=-(2**53), max_value=2**53)
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# JSON-representable payloads (lists rather than tuples so they survive a round trip)
json_scalars = st.none() | booleans | integers | texts
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=5) | st.dictionaries(texts, children, max_size=5),
    max_leaves=20,
)

# Simple callables for functor-law checks
int_functions = st.sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: -x,
    lambda x: x // 3,
])

"""
Cursor Core (FROZEN)

Defines the lazy, bidirectional sequence cursor and its pipeline stages.

Invariants:
- Backing elements are a fixed snapshot, never resized or reordered.
- Stages apply strictly in registration order and stop at the first NO_VALUE.
- Position moves only through next() / prev(); combinators never move it.
- Exhaustion is a NO_VALUE result, never an exception.

Core explicitly does NOT:
- Pull from infinite / generator sources
- Evaluate in parallel or lock for concurrent callers
- Mutate the backing collection
"""

"""Per-ecosystem classifiers.

Each module exposes ``async classify(root) -> StackGuess | None``. ``None``
or an exception means the signature does not match.
"""

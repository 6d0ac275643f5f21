"""Host adapters living outside the engine core."""

"""Analysis modules operating on in-memory survey datasets."""

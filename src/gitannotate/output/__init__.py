"""Output: terminal rendering, path styling, and the rename manifest."""

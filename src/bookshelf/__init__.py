"""Bookshelf: a small book catalogue built as service -> store layers."""

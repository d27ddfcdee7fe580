"""Command implementations for stk."""

"""A small interactive shell: tokenizer, command lookup, pipelines and builtins."""

__version__ = "0.1.0"
__all__ = ["builtins", "execute", "pipeline", "shell", "textutil", "tokenizer"]
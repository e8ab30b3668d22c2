"""AES-128 block encryption in pure Python, with a self-test demo command."""

__version__ = "0.1.0"
__all__ = ["cipher", "demo"]
"""gitpane — typed views over git's status, branch, diff and commit output."""

__version__ = "0.1.0"

"""Exceptions raised by kubecompare outside the comparison core."""

from typing import List


class KubeCompareError(Exception):
    """Base class for kubecompare errors."""


class InputAccessError(KubeCompareError):
    """
    One or more input files are missing or unreadable. Carries every
    message so the CLI can report all of them before exiting.
    """

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class KeyCollisionError(KubeCompareError):
    """
    Two mapping keys render to the same text (e.g. `1` and `"1"`), so the
    document has no faithful string-keyed form.
    """

#!/usr/bin/env python3
"""
KUBECOMPARE SPLITTER
--------------------
Cuts a multi-document manifest stream (kustomize / helm template output)
into raw segments, one per document, using the `---` separator line.

Author: KubeCompare Team
Date: 2026-10-19
"""

import re
from typing import List

# A separator is a line holding only '---' (trailing blanks tolerated).
SEPARATOR_PATTERN = re.compile(r'^---[ \t]*$', re.MULTILINE)


def clean_artifacts(text: str) -> str:
    """
    Removes the UTF-8 BOM marker and standardizes line endings to LF.
    """
    text = text.lstrip('\ufeff')
    return text.replace('\r\n', '\n').replace('\r', '\n')


def split_manifests(text: str) -> List[str]:
    """
    Returns the raw segments in stream order. Empty segments are kept;
    the decoder is responsible for discarding them.
    """
    return SEPARATOR_PATTERN.split(clean_artifacts(text))

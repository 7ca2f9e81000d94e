"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

1. first
2. second

```python
print("hello")
```

---

Footer paragraph.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD

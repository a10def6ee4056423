import numpy as np
import pytest

WORKED_GRID = [
    [0, 1, 0, 0, 0, 0, 0, 1, 1],
    [1, 1, 1, 0, 1, 0, 0, 1, 0],
    [0, 1, 0, 0, 1, 0, 0, 1, 0],
    [0, 1, 1, 1, 1, 0, 0, 1, 0],
    [0, 0, 0, 1, 0, 0, 0, 1, 0],
    [0, 1, 0, 1, 1, 1, 1, 1, 0],
    [1, 1, 1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 1, 0, 0, 0, 1],
    [1, 1, 1, 0, 0, 0, 0, 1, 1],
    [1, 0, 1, 0, 1, 0, 1, 1, 1],
]

WORKED_LABELS = [
    [-1, 0, -1, -1, -1, -1, -1, 0, 0],
    [0, 0, 0, -1, 0, -1, -1, 0, -1],
    [-1, 0, -1, -1, 0, -1, -1, 0, -1],
    [-1, 0, 0, 0, 0, -1, -1, 0, -1],
    [-1, -1, -1, 0, -1, -1, -1, 0, -1],
    [-1, 1, -1, 0, 0, 0, 0, 0, -1],
    [1, 1, 1, -1, -1, -1, -1, -1, 2],
    [1, -1, 1, 1, 1, -1, -1, -1, 2],
    [1, 1, 1, -1, -1, -1, -1, 2, 2],
    [1, -1, 1, -1, 3, -1, 2, 2, 2],
]


def flood_fill(foreground):
    """Independent 4-connected component reference: (component grid, count)."""
    fg = np.asarray(foreground, dtype=bool)
    h, w = fg.shape
    comp = np.full((h, w), -1, dtype=np.int64)
    count = 0
    for y in range(h):
        for x in range(w):
            if not fg[y, x] or comp[y, x] != -1:
                continue
            comp[y, x] = count
            stack = [(y, x)]
            while stack:
                cy, cx = stack.pop()
                for ny, nx in ((cy - 1, cx), (cy + 1, cx), (cy, cx - 1), (cy, cx + 1)):
                    if 0 <= ny < h and 0 <= nx < w and fg[ny, nx] and comp[ny, nx] == -1:
                        comp[ny, nx] = count
                        stack.append((ny, nx))
            count += 1
    return comp, count


def check_labeling(labels, foreground, sizes):
    """Shared invariants of a finished labeling against the flood fill reference."""
    labels = np.asarray(labels)
    fg = np.asarray(foreground, dtype=bool)
    reference, count = flood_fill(fg)
    assert np.all(labels[~fg] == -1)
    assert len(sizes) == count
    assert sum(sizes) == int(fg.sum())
    assert all(sizes[i] >= sizes[i + 1] for i in range(len(sizes) - 1))
    assert sorted(set(labels[fg].tolist())) == list(range(count))
    for i, size in enumerate(sizes):
        assert int((labels == i).sum()) == size
    pairs = set(zip(labels[fg].tolist(), reference[fg].tolist()))
    assert len(pairs) == count


@pytest.fixture
def worked_grid():
    return np.array(WORKED_GRID)


@pytest.fixture
def worked_labels():
    return np.array(WORKED_LABELS)

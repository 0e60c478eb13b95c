"""Shared test fixtures: small front-end projects built under tmp_path."""

from pathlib import Path

import pytest

from codebase_audit.config import AuditConfig


def write_file(root: Path, name: str, content: str) -> Path:
    p = Path(root) / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


FOLDER_TREE = """\
import React from 'react'

/**
 * Folder tree view.
 * @description Renders nested folders.
 */
export function FolderTree() {
  return <ul className="tree" />
}
"""

SIDEBAR = """\
import React from 'react'
import { FolderTree } from './folder-tree'

export default function Sidebar() {
  return (
    <aside>
      <FolderTree />
    </aside>
  )
}
"""

HOME_PAGE = """\
import React from 'react'
import Sidebar from '@/components/sidebar'

export default function HomePage() {
  return <Sidebar />
}
"""

ORPHAN = """\
import React from 'react'

export const Orphan = () => <span>alone</span>
"""

FORMAT_UTIL = """\
export function formatDate(d) {
  return d.toISOString()
}
"""

TOGGLE_HOOK = """\
import { useState } from 'react'

export function useToggle(initial) {
  const [on, setOn] = useState(initial)
  return [on, () => setOn(!on)]
}
"""


@pytest.fixture
def sample_project(tmp_path) -> Path:
    """
    Four components plus non-component sources:

    - folder-tree: documented, tested, used by sidebar
    - sidebar: tested (in __tests__), used by the home page
    - app/page: the home page, not referenced by anything
    - orphan: unused, untested, undocumented
    """
    root = tmp_path / "project"
    write_file(root, "src/components/folder-tree.tsx", FOLDER_TREE)
    write_file(root, "src/components/sidebar.tsx", SIDEBAR)
    write_file(root, "src/components/orphan.tsx", ORPHAN)
    write_file(root, "src/app/page.tsx", HOME_PAGE)
    write_file(root, "src/lib/format.ts", FORMAT_UTIL)
    write_file(root, "src/hooks/use-toggle.ts", TOGGLE_HOOK)

    # Tests are excluded from the scan but still count as coverage.
    write_file(
        root,
        "src/components/folder-tree.test.tsx",
        "import { FolderTree } from './folder-tree'\ntest('renders', () => {})\n",
    )
    write_file(
        root,
        "src/components/__tests__/sidebar.test.tsx",
        "import Sidebar from '../sidebar'\ntest('renders', () => {})\n",
    )
    write_file(root, "node_modules/react/index.js", "export const Fake = 1\n")
    return root


@pytest.fixture
def sample_config(sample_project, tmp_path) -> AuditConfig:
    return AuditConfig(
        base_path=str(sample_project),
        output_dir=str(tmp_path / "reports"),
        formats=["json", "html"],
    )

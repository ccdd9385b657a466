"""Property names the host project model is known to expose.

Different project types expose different subsets; each tuple lists the most
authoritative name first.
"""

from __future__ import annotations

from typing import Final

PROJECT_PATH_KEYS: Final = ("FullProjectFileName", "FullPath", "ProjectFile")
PROJECT_FILE_NAME_KEY: Final = "FileName"

OUTPUT_PATH_KEYS: Final = ("PrimaryOutput", "CodeAnalysisInputAssembly", "OutputPath")
OUTPUT_FILE_NAME_KEY: Final = "OutputFileName"

ITEM_PATH_KEY: Final = "FullPath"

ACTIVE_CONFIGURATION_KEY: Final = "ActiveConfiguration"

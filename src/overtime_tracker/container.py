from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DATA_FILE_NAME
from .overtime.json_overtime_repository import JsonOvertimeRepository
from .overtime.service import OvertimeService
from .storage.data_file import DataFile, DataFileConfig


@dataclass(frozen=True)
class Container:
    data_file: DataFile

    overtime_repo: JsonOvertimeRepository

    overtime_service: OvertimeService


def build_container(*, data_dir: Optional[str] = None, file_name: str = DATA_FILE_NAME) -> Container:
    data_file = DataFile(DataFileConfig(data_dir=data_dir, file_name=file_name))

    overtime_repo = JsonOvertimeRepository(data_file)
    overtime_service = OvertimeService(overtime_repo)

    return Container(
        data_file=data_file,
        overtime_repo=overtime_repo,
        overtime_service=overtime_service,
    )

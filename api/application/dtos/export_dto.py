# api/application/dtos/export_dto.py
from typing import Literal

from pydantic import BaseModel

FormatoExport = Literal["csv", "json", "xlsx", "pdf"]


class ExportRequestDTO(BaseModel):
    formato: FormatoExport

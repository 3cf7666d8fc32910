"""Crew CSV import schemas for the validate and import workflow"""
import enum
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


class ImportAction(str, enum.Enum):
    VALIDATE = "validate"
    IMPORT = "import"


class CrewImportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    csv_content: Optional[str] = Field(default=None, alias="csvContent")
    action: Optional[str] = ImportAction.VALIDATE.value


class CrewImportRow(BaseModel):
    """Normalized candidate for one crew member"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    rank: Optional[str] = None
    position: Optional[str] = None
    nationality: Optional[str] = None
    vessel_assignment: str
    join_date: str
    status: str
    row_number: int = Field(alias="rowNumber")


class ValidationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    errors: List[str]
    warnings: List[str]
    data: CrewImportRow
    row_number: int = Field(alias="rowNumber")


class ParseResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    results: List[ValidationResult]
    total_rows: int = Field(alias="totalRows")
    valid_rows: int = Field(alias="validRows")
    error_rows: int = Field(alias="errorRows")
    warning_rows: int = Field(alias="warningRows")
    vessel_mapping: Dict[str, int] = Field(default_factory=dict, alias="vesselMapping")


class ImportRowError(BaseModel):
    row: int
    error: str


class ImportOutcome(BaseModel):
    success: bool = True
    created: int
    skipped: int
    errors: List[ImportRowError]

from dataclasses import dataclass
from pathlib import Path
from typing import (
    Any,
    List,
    Optional,
)

from pydantic import (
    BaseModel as PydanticBaseModel,
)
from pydantic import (
    PrivateAttr,
    conint,
    field_validator,
)


class FileNamesData(PydanticBaseModel):
    work_dir: str = "./"
    output_dir: str = "./output"
    prefix: str = "locate"
    datafile: str = ""
    queryfile: str = ""

    @field_validator("prefix")
    @classmethod
    def check_prefix(cls, value: str) -> str:
        if len(value.strip()) == 0:
            raise ValueError("prefix unspecified")
        return value

    def resolve(self, filename: str) -> Path:
        path = Path(filename)
        if path.is_absolute():
            return path
        return Path(self.work_dir) / path


class SearchSettings(PydanticBaseModel):
    check_sorted: bool = False
    write_output: bool = True
    precision: conint(ge=1, le=16) = 6


@dataclass
class RuntimeData:
    nproc: int
    nseq: int
    nqueries: int
    q_start: int
    q_end: int


class LocateData(PydanticBaseModel):
    file_names: FileNamesData
    search: SearchSettings
    sequence: Optional[List[float]] = None
    queries: Optional[List[float]] = None

    _runtime: Optional[RuntimeData] = PrivateAttr(default=None)
    _filename: str = PrivateAttr(default="")

    def set_runtime_data(self, runtime: RuntimeData) -> None:
        self._runtime = runtime

    def get_runtime_data(self) -> Optional[RuntimeData]:
        return self._runtime

    @property
    def filename(self) -> str:
        return self._filename

    def __init__(self, filename: str = "", *, validate: bool = True, **data: Any) -> None:
        def filter_keys(cls, d):
            return {k: d.pop(k) for k in list(cls.model_fields) if k in d}

        data["file_names"] = FileNamesData(**filter_keys(FileNamesData, data))
        data["search"] = SearchSettings(**filter_keys(SearchSettings, data))
        super().__init__(**data)
        self._filename = filename
        if validate:
            self.validate_input()

    def validate_input(self) -> None:
        have_sequence = self.sequence is not None
        have_datafile = len(self.file_names.datafile.strip()) != 0
        if have_sequence == have_datafile:
            raise ValueError("exactly one of sequence and datafile has to be given")

        have_queries = self.queries is not None
        have_queryfile = len(self.file_names.queryfile.strip()) != 0
        if have_queries == have_queryfile:
            raise ValueError("exactly one of queries and queryfile has to be given")

        if have_sequence and len(self.sequence) < 2:
            raise ValueError("sequence needs at least 2 values")

# routes/params.py
from typing import Annotated
from fastapi import Path
from ..validation import MAX_INTEGER

# Ids outside the BIGINT range cannot exist; reject them before they reach the driver
RecordId = Annotated[int, Path(ge=-MAX_INTEGER - 1, le=MAX_INTEGER)]

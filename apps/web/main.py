"""FastAPI web application for depclash."""

import logging

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from pydantic import BaseModel

from depclash.aggregate import aggregate_manifests
from depclash.detect import detect
from depclash.errors import ManifestParseError
from depclash.parse_node import parse_package_json

logger = logging.getLogger(__name__)

app = FastAPI(
    title="depclash",
    description="Find dependencies pinned to different versions across package.json files",
    version="0.1.0",
)


class ManifestInput(BaseModel):
    """One package.json submitted for analysis."""
    path: str
    content: str


class AnalyzeRequest(BaseModel):
    """Request model for analyzing a set of manifests."""
    manifests: list[ManifestInput]
    dev_overrides_direct: bool = True


class VersionUsageModel(BaseModel):
    version: str
    usedBy: list[str]


class ConflictModel(BaseModel):
    package: str
    versions: list[VersionUsageModel]


class AnalyzeResponse(BaseModel):
    """Response model for a conflict analysis."""
    manifest_count: int
    has_conflicts: bool
    conflicts: list[ConflictModel]


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_manifests(request: AnalyzeRequest):
    """Report version conflicts across the submitted manifests."""
    try:
        if not request.manifests:
            raise HTTPException(status_code=400, detail="No manifests provided")

        manifests = [
            parse_package_json(item.content, item.path) for item in request.manifests
        ]
        index = aggregate_manifests(manifests, dev_overrides_direct=request.dev_overrides_direct)
        conflicts = detect(index, relativize=False)

        return AnalyzeResponse(
            manifest_count=len(manifests),
            has_conflicts=bool(conflicts),
            conflicts=[conflict.to_dict() for conflict in conflicts],
        )

    except HTTPException:
        # Re-raise HTTP exceptions (don't convert to 500)
        raise
    except ManifestParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Analysis failed")
        raise HTTPException(status_code=500, detail=f"Error analyzing manifests: {str(e)}")


@app.post("/api/upload", response_model=AnalyzeResponse)
async def upload_manifests(
    files: list[UploadFile] = File(...),
    dev_overrides_direct: bool = Form(True),
):
    """Upload package.json files and analyze them together."""
    manifests = []
    for upload in files:
        if not upload.filename:
            raise HTTPException(status_code=400, detail="Uploaded file has no name")
        try:
            content = (await upload.read()).decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(
                status_code=400, detail=f"File {upload.filename} must be valid UTF-8 text"
            )
        manifests.append(ManifestInput(path=upload.filename, content=content))

    request = AnalyzeRequest(manifests=manifests, dev_overrides_direct=dev_overrides_direct)
    return await analyze_manifests(request)

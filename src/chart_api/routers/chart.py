from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from chart_api.dependencies import Config, Directory
from chart_api.services import chartService
from directory_connector import DirectoryConnectionError
from tree_builder import NotFoundError, OrgChartError

router = APIRouter(prefix="/chart", tags=["chart"])

DOT_MEDIA_TYPE = "text/vnd.graphviz"


@router.get("/{user}", response_class=PlainTextResponse)
def get_chart(user: str, db: Directory, config: Config, title: str = "") -> PlainTextResponse:
    """Build the org chart below *user* and return it as DOT text."""
    try:
        dot = chartService.build_chart(user, title, config, db)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except OrgChartError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except DirectoryConnectionError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    return PlainTextResponse(dot, media_type=DOT_MEDIA_TYPE)

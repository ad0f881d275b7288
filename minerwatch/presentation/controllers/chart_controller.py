"""Chart endpoints exposing the synchronized hashrate series."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from minerwatch.application.dtos.chart_dto import ChartSeriesDTO, LatestPointDTO
from minerwatch.application.dtos.system_info_dto import SystemInfoDTO
from minerwatch.application.use_cases.chart_use_cases import (
    GetChartSeriesUseCase,
    GetLatestPointUseCase,
    GetLatestSystemInfoUseCase,
)
from minerwatch.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Chart"])


@router.get("/chart", response_model=ChartSeriesDTO)
@inject
async def get_chart(
    get_chart_series_use_case: GetChartSeriesUseCase = Depends(
        Provide["get_chart_series_use_case"]
    ),
) -> ChartSeriesDTO:
    """Return the rolling one-hour hashrate series."""
    series = await get_chart_series_use_case.execute()
    logger.debug("chart.series.retrieved", length=series.length)
    return series


@router.get("/chart/latest", response_model=LatestPointDTO)
@inject
async def get_latest_point(
    get_latest_point_use_case: GetLatestPointUseCase = Depends(
        Provide["get_latest_point_use_case"]
    ),
) -> LatestPointDTO:
    """Return the newest point of the series."""
    point = await get_latest_point_use_case.execute()
    if point is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No hashrate data has been received yet",
        )
    return point


@router.get("/telemetry", response_model=SystemInfoDTO)
@inject
async def get_telemetry(
    get_latest_system_info_use_case: GetLatestSystemInfoUseCase = Depends(
        Provide["get_latest_system_info_use_case"]
    ),
) -> SystemInfoDTO:
    """Return the normalized device telemetry from the last applied poll."""
    info = await get_latest_system_info_use_case.execute()
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No telemetry has been received yet",
        )
    return info

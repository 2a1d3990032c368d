# cable_cutsim/io/cut_events.py

from dataclasses import dataclass


# Base type for analytics records handed to the recorder
@dataclass
class CutRecord:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable record name


@dataclass
class CutSimulatedRecord(CutRecord):
    cut_id: str
    cable: str
    segment: str
    distance_km: float
    lat: float
    lng: float
    cut_type: str
    method: str = "POST"


@dataclass
class CutRejectedRecord(CutRecord):
    start: str
    end: str
    fields: list[str]

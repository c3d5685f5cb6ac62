from __future__ import annotations

import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from archgraph.analyze import analyze_units
from archgraph.corpus import CorpusError, DuplicatePolicy, filter_by_prefix
from archgraph.diagram import render_plantuml
from archgraph.fs_scan import load_units
from archgraph.graph import build_graph
from archgraph.model import AnalyzeResult, SourceUnit


app = FastAPI(title="Architecture Graph Analyzer")


class AnalyzeRequest(BaseModel):
	root_path: str
	prefix: str = ""
	duplicates: Optional[DuplicatePolicy] = None


class SourceFile(BaseModel):
	path: str
	text: Optional[str] = None


class UnitsRequest(BaseModel):
	units: List[SourceFile]
	prefix: str = ""
	duplicates: Optional[DuplicatePolicy] = None


def _units_from_root(root_path: str) -> List[SourceUnit]:
	root = os.path.abspath(root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")
	return load_units(root)


@app.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	units = _units_from_root(req.root_path)
	try:
		return analyze_units(units, root=os.path.abspath(req.root_path), prefix=req.prefix, policy=req.duplicates)
	except CorpusError as e:
		raise HTTPException(status_code=400, detail=str(e))


@app.post("/analyze/units", response_model=AnalyzeResult)
def analyze_files(req: UnitsRequest) -> AnalyzeResult:
	try:
		units = [SourceUnit.from_path(f.path, f.text) for f in req.units]
		return analyze_units(units, prefix=req.prefix, policy=req.duplicates)
	except CorpusError as e:
		raise HTTPException(status_code=400, detail=str(e))


@app.post("/diagram", response_class=PlainTextResponse)
def diagram(req: AnalyzeRequest) -> str:
	units = _units_from_root(req.root_path)
	try:
		graph = build_graph(filter_by_prefix(units, req.prefix), req.duplicates)
	except CorpusError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return render_plantuml(graph)


def create_app() -> FastAPI:
	return app

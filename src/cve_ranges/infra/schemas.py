from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReportVersion(BaseModel):
	"""One timeline event: exactly one of introduced / fixed"""
	introduced: Optional[str] = None
	fixed: Optional[str] = None

	@model_validator(mode="after")
	def _one_kind(self) -> "ReportVersion":
		if (self.introduced is None) == (self.fixed is None):
			raise ValueError("each version entry needs exactly one of 'introduced' or 'fixed'")
		return self


class ReportPackage(BaseModel):
	package: str


class ReportModule(BaseModel):
	"""A module of the report and its chronological version events"""
	module: str
	versions: list[ReportVersion] = Field(default_factory=list)
	packages: list[ReportPackage] = Field(default_factory=list)


class ReportDocument(BaseModel):
	id: Optional[str] = None
	modules: list[ReportModule] = Field(default_factory=list)


class Cve5VersionRange(BaseModel):
	"""CVE JSON 5.0 affected[].versions[] entry"""
	model_config = ConfigDict(populate_by_name=True)

	version: str = ""
	less_than: Optional[str] = Field(None, alias="lessThan")
	status: str
	version_type: Optional[str] = Field(None, alias="versionType")


class Cve5Affected(BaseModel):
	"""CVE JSON 5.0 affected[] entry"""
	model_config = ConfigDict(populate_by_name=True)

	vendor: Optional[str] = None
	product: Optional[str] = None
	collection_url: Optional[str] = Field(None, alias="collectionURL")
	package_name: Optional[str] = Field(None, alias="packageName")
	versions: Optional[list[Cve5VersionRange]] = None
	default_status: Optional[str] = Field(None, alias="defaultStatus")
	platforms: Optional[list[str]] = None


class Cve5Cna(BaseModel):
	affected: list[Cve5Affected] = Field(default_factory=list)


class Cve5Containers(BaseModel):
	cna: Cve5Cna


class Cve5Record(BaseModel):
	"""Top level of a CVE JSON 5.0 record (only the parts used here)"""
	model_config = ConfigDict(populate_by_name=True)

	data_type: Optional[str] = Field(None, alias="dataType")
	data_version: Optional[str] = Field(None, alias="dataVersion")
	containers: Cve5Containers

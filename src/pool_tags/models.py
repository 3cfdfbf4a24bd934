from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict

PROJECT_NAME = "Balancer"
WEBSITE = "https://balancer.fi/"


class PoolToken(BaseModel):
    model_config = ConfigDict(frozen=True)
    symbol: str
    name: str


class Pool(BaseModel):
    model_config = ConfigDict(frozen=True)
    address: str
    createTime: int
    tokens: List[PoolToken] = Field(default_factory=list)


class PoolsPage(BaseModel):
    pools: List[Pool]


class ContractTag(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    contract_address: str = Field(alias="Contract Address")
    public_name_tag: str = Field(alias="Public Name Tag")
    project_name: str = Field(default=PROJECT_NAME, alias="Project Name")
    website: str = Field(default=WEBSITE, alias="UI/Website Link")
    public_note: str = Field(alias="Public Note")

    def as_record(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)

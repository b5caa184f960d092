"""
Fund catalog: validated, immutable snapshot of the knowledge base
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from ..models.fund import CatalogDefect, Institution, PolicyFundKnowledge
from .funds import SEED_FUND_RECORDS
from .institutions import INSTITUTION_RECORDS

logger = logging.getLogger(__name__)


class Catalog:
    """Read-only collection of funds and institutions in insertion order"""

    def __init__(
        self,
        funds: Iterable[PolicyFundKnowledge],
        institutions: Iterable[Institution],
        defects: Optional[Iterable[CatalogDefect]] = None
    ):
        self._funds: Tuple[PolicyFundKnowledge, ...] = tuple(funds)
        self._by_id: Dict[str, PolicyFundKnowledge] = {f.id: f for f in self._funds}
        self._institutions: Dict[str, Institution] = {i.id: i for i in institutions}
        self._defects: Tuple[CatalogDefect, ...] = tuple(defects or ())

    def __len__(self) -> int:
        return len(self._funds)

    def __iter__(self):
        return iter(self._funds)

    @property
    def funds(self) -> Tuple[PolicyFundKnowledge, ...]:
        return self._funds

    @property
    def defects(self) -> Tuple[CatalogDefect, ...]:
        return self._defects

    @property
    def institutions(self) -> List[Institution]:
        return list(self._institutions.values())

    def get_fund(self, fund_id: str) -> Optional[PolicyFundKnowledge]:
        return self._by_id.get(fund_id)

    def list_funds(
        self,
        institution_id: Optional[str] = None,
        track: Optional[str] = None
    ) -> List[PolicyFundKnowledge]:
        funds = list(self._funds)
        if institution_id:
            funds = [f for f in funds if f.institution_id == institution_id]
        if track:
            funds = [f for f in funds if f.track == track]
        return funds

    def institution_name(self, institution_id: str) -> str:
        institution = self._institutions.get(institution_id)
        return institution.name if institution else institution_id


def load_catalog(
    fund_records: Iterable[Dict[str, Any]],
    institution_records: Iterable[Dict[str, Any]] = INSTITUTION_RECORDS
) -> Catalog:
    """
    Validate raw fund records into a Catalog.

    A record that fails validation is skipped and reported as a
    CatalogDefect; the remaining records still load.

    Args:
        fund_records: Raw fund dictionaries
        institution_records: Raw institution dictionaries

    Returns:
        Catalog snapshot
    """
    institutions = [Institution.model_validate(r) for r in institution_records]

    funds: List[PolicyFundKnowledge] = []
    defects: List[CatalogDefect] = []
    seen_ids = set()

    for record in fund_records:
        fund_id = record.get("id") if isinstance(record, dict) else None
        try:
            fund = PolicyFundKnowledge.model_validate(record)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            logger.warning(f"Skipping fund record {fund_id!r}: {'; '.join(errors)}")
            defects.append(CatalogDefect(fund_id=fund_id, errors=errors))
            continue

        if fund.id in seen_ids:
            logger.warning(f"Skipping duplicate fund record {fund.id!r}")
            defects.append(CatalogDefect(fund_id=fund.id, errors=["duplicate fund id"]))
            continue

        seen_ids.add(fund.id)
        funds.append(fund)

    logger.info(f"Loaded {len(funds)} funds ({len(defects)} defects)")
    return Catalog(funds, institutions, defects)


default_catalog = load_catalog(SEED_FUND_RECORDS)

__all__ = ["Catalog", "CatalogDefect", "load_catalog", "default_catalog"]

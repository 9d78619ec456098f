"""Typed config cell records and their molecule layouts.

Defaults carry the static business parameters of a release.  Field order in
each ``to_molecule()`` is the schema order the contracts expect.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from configcell.core import molecule as mol
from configcell.core.hasher import HASH_LENGTH
from configcell.models.profiles import PriceRule, ReleaseRule

ZERO_HASH = bytes(HASH_LENGTH)


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_molecule(self) -> bytes:
        raise NotImplementedError(f"{type(self).__name__} has no molecule layout")


class ConfigCellAccount(_Entity):
    max_length: int = 42
    # basic_capacity contains 1 CKB for kinds of fees
    basic_capacity: int = 20_600_000_000
    prepared_fee_capacity: int = 100_000_000
    expiration_grace_period: int = 2_592_000
    record_min_ttl: int = 300
    record_size_limit: int = 5000
    transfer_account_fee: int = 10_000
    edit_manager_fee: int = 10_000
    edit_records_fee: int = 10_000
    transfer_account_throttle: int = 300
    edit_manager_throttle: int = 300
    edit_records_throttle: int = 300

    def to_molecule(self) -> bytes:
        return mol.table(
            mol.uint32(self.max_length),
            mol.uint64(self.basic_capacity),
            mol.uint64(self.prepared_fee_capacity),
            mol.uint32(self.expiration_grace_period),
            mol.uint32(self.record_min_ttl),
            mol.uint32(self.record_size_limit),
            mol.uint64(self.transfer_account_fee),
            mol.uint64(self.edit_manager_fee),
            mol.uint64(self.edit_records_fee),
            mol.uint32(self.transfer_account_throttle),
            mol.uint32(self.edit_manager_throttle),
            mol.uint32(self.edit_records_throttle),
        )


class ConfigCellApply(_Entity):
    apply_min_waiting_block_number: int = 1
    apply_max_waiting_block_number: int = 5760

    def to_molecule(self) -> bytes:
        return mol.table(
            mol.uint32(self.apply_min_waiting_block_number),
            mol.uint32(self.apply_max_waiting_block_number),
        )


class ConfigCellIncome(_Entity):
    basic_capacity: int = 20_000_000_000
    max_records: int = 50
    min_transfer_capacity: int = 9_000_000_000

    def to_molecule(self) -> bytes:
        return mol.table(
            mol.uint64(self.basic_capacity),
            mol.uint32(self.max_records),
            mol.uint64(self.min_transfer_capacity),
        )


class TypeIdTable(_Entity):
    """Type IDs of the contract cells.

    Deploy scripts search and replace these zero hashes, so they stay zero
    here.
    """

    account_cell: bytes = ZERO_HASH
    apply_register_cell: bytes = ZERO_HASH
    balance_cell: bytes = ZERO_HASH
    income_cell: bytes = ZERO_HASH
    pre_account_cell: bytes = ZERO_HASH
    proposal_cell: bytes = ZERO_HASH

    def to_molecule(self) -> bytes:
        return mol.table(
            *(
                mol.byte_array(h, HASH_LENGTH)
                for h in (
                    self.account_cell,
                    self.apply_register_cell,
                    self.balance_cell,
                    self.income_cell,
                    self.pre_account_cell,
                    self.proposal_cell,
                )
            )
        )


class OutPoint(_Entity):
    tx_hash: bytes = ZERO_HASH
    index: int = 0

    def to_molecule(self) -> bytes:
        return mol.struct_(
            mol.byte_array(self.tx_hash, HASH_LENGTH), mol.uint32(self.index)
        )


class DasLockOutPointTable(_Entity):
    ckb_signall: OutPoint = OutPoint()
    eth: OutPoint = OutPoint()
    tron: OutPoint = OutPoint()

    def to_molecule(self) -> bytes:
        return mol.table(
            self.ckb_signall.to_molecule(),
            self.eth.to_molecule(),
            self.tron.to_molecule(),
        )


class ConfigCellMain(_Entity):
    status: int = 1
    type_id_table: TypeIdTable = TypeIdTable()
    das_lock_out_point_table: DasLockOutPointTable = DasLockOutPointTable()

    def to_molecule(self) -> bytes:
        return mol.table(
            mol.uint8(self.status),
            self.type_id_table.to_molecule(),
            self.das_lock_out_point_table.to_molecule(),
        )


class ConfigCellPrice(_Entity):
    invited_discount: int = 500
    prices: tuple[PriceRule, ...] = Field(default_factory=tuple)

    def to_molecule(self) -> bytes:
        discount = mol.table(mol.uint32(self.invited_discount))
        prices = mol.dynvec(
            [
                mol.table(
                    mol.uint8(p.length), mol.uint64(p.new), mol.uint64(p.renew)
                )
                for p in self.prices
            ]
        )
        return mol.table(discount, prices)


class ConfigCellProposal(_Entity):
    proposal_min_confirm_interval: int = 2
    proposal_min_extend_interval: int = 1
    proposal_min_recycle_interval: int = 8
    proposal_max_account_affect: int = 50
    proposal_max_pre_account_contain: int = 50

    def to_molecule(self) -> bytes:
        return mol.table(
            mol.uint8(self.proposal_min_confirm_interval),
            mol.uint8(self.proposal_min_extend_interval),
            mol.uint8(self.proposal_min_recycle_interval),
            mol.uint32(self.proposal_max_account_affect),
            mol.uint32(self.proposal_max_pre_account_contain),
        )


class ConfigCellProfitRate(_Entity):
    channel: int = 1000
    inviter: int = 1000
    proposal_create: int = 200
    proposal_confirm: int = 0
    income_consolidate: int = 500

    def to_molecule(self) -> bytes:
        return mol.table(
            mol.uint32(self.channel),
            mol.uint32(self.inviter),
            mol.uint32(self.proposal_create),
            mol.uint32(self.proposal_confirm),
            mol.uint32(self.income_consolidate),
        )


class ConfigCellRelease(_Entity):
    release_rules: tuple[ReleaseRule, ...] = Field(default_factory=tuple)

    def to_molecule(self) -> bytes:
        rules = mol.dynvec(
            [
                mol.table(
                    mol.uint32(r.length),
                    mol.uint64(r.release_start),
                    mol.uint64(r.release_end),
                )
                for r in self.release_rules
            ]
        )
        return mol.table(rules)

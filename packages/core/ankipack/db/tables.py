"""Tables of Anki's ``collection.anki2`` database.

Column names, types and order follow the schema Anki's importer expects.
"""

from sqlalchemy import Column, Index, Integer, Table, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all collection tables."""

    pass


class ColRow(Base):
    """The single collection row holding configuration blobs."""

    __tablename__ = "col"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    crt: Mapped[int] = mapped_column(Integer, nullable=False)
    mod: Mapped[int] = mapped_column(Integer, nullable=False)
    scm: Mapped[int] = mapped_column(Integer, nullable=False)
    ver: Mapped[int] = mapped_column(Integer, nullable=False)
    dty: Mapped[int] = mapped_column(Integer, nullable=False)
    usn: Mapped[int] = mapped_column(Integer, nullable=False)
    ls: Mapped[int] = mapped_column(Integer, nullable=False)
    conf: Mapped[str] = mapped_column(Text, nullable=False)
    models: Mapped[str] = mapped_column(Text, nullable=False)
    decks: Mapped[str] = mapped_column(Text, nullable=False)
    dconf: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[str] = mapped_column(Text, nullable=False)


class NoteRow(Base):
    """One row per note."""

    __tablename__ = "notes"
    __table_args__ = (
        Index("ix_notes_usn", "usn"),
        Index("ix_notes_csum", "csum"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    guid: Mapped[str] = mapped_column(Text, nullable=False)
    mid: Mapped[int] = mapped_column(Integer, nullable=False)
    mod: Mapped[int] = mapped_column(Integer, nullable=False)
    usn: Mapped[int] = mapped_column(Integer, nullable=False)
    tags: Mapped[str] = mapped_column(Text, nullable=False)
    flds: Mapped[str] = mapped_column(Text, nullable=False)
    # Declared integer by Anki even though it holds the sort field text.
    sfld: Mapped[str] = mapped_column(Integer, nullable=False)
    csum: Mapped[int] = mapped_column(Integer, nullable=False)
    flags: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)


class CardRow(Base):
    """One row per card."""

    __tablename__ = "cards"
    __table_args__ = (
        Index("ix_cards_usn", "usn"),
        Index("ix_cards_nid", "nid"),
        Index("ix_cards_sched", "did", "queue", "due"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nid: Mapped[int] = mapped_column(Integer, nullable=False)
    did: Mapped[int] = mapped_column(Integer, nullable=False)
    ord: Mapped[int] = mapped_column(Integer, nullable=False)
    mod: Mapped[int] = mapped_column(Integer, nullable=False)
    usn: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[int] = mapped_column(Integer, nullable=False)
    queue: Mapped[int] = mapped_column(Integer, nullable=False)
    due: Mapped[int] = mapped_column(Integer, nullable=False)
    ivl: Mapped[int] = mapped_column(Integer, nullable=False)
    factor: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    lapses: Mapped[int] = mapped_column(Integer, nullable=False)
    left: Mapped[int] = mapped_column(Integer, nullable=False)
    odue: Mapped[int] = mapped_column(Integer, nullable=False)
    odid: Mapped[int] = mapped_column(Integer, nullable=False)
    flags: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)


class RevlogRow(Base):
    """Review history; always empty in a freshly built package."""

    __tablename__ = "revlog"
    __table_args__ = (
        Index("ix_revlog_usn", "usn"),
        Index("ix_revlog_cid", "cid"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    cid: Mapped[int] = mapped_column(Integer, nullable=False)
    usn: Mapped[int] = mapped_column(Integer, nullable=False)
    ease: Mapped[int] = mapped_column(Integer, nullable=False)
    ivl: Mapped[int] = mapped_column(Integer, nullable=False)
    last_ivl: Mapped[int] = mapped_column("lastIvl", Integer, nullable=False)
    factor: Mapped[int] = mapped_column(Integer, nullable=False)
    time: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[int] = mapped_column(Integer, nullable=False)


# Deletion log; Anki declares it without a primary key, so it cannot be mapped.
graves = Table(
    "graves",
    Base.metadata,
    Column("usn", Integer, nullable=False),
    Column("oid", Integer, nullable=False),
    Column("type", Integer, nullable=False),
)

"""JSON records stored in the ``col`` table.

Anki keeps models, decks, deck options and the collection configuration as
JSON blobs on the single ``col`` row. Each record below dumps to the exact key
names Anki's importer reads (``model_dump(by_alias=True)``).
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DECK_ID = 1
DEFAULT_DECK_CONFIG_ID = 1


class _Entry(BaseModel):
    """Base for records serialized into the collection."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class FieldEntry(_Entry):
    """A field as stored in a model's ``flds`` list."""

    name: str
    ord: int
    font: str = "Liberation Sans"
    size: int = 20
    rtl: bool = False
    sticky: bool = False
    media: list[str] = Field(default_factory=list)


class TemplateEntry(_Entry):
    """A template as stored in a model's ``tmpls`` list."""

    name: str
    ord: int
    qfmt: str
    afmt: str
    bqfmt: str = ""
    bafmt: str = ""
    bfont: str = ""
    bsize: int = 0
    did: int | None = None


class ModelEntry(_Entry):
    """A model (note type) keyed by its id in ``col.models``."""

    id: str
    name: str
    type: int
    mod: int
    usn: int = -1
    sortf: int
    did: int
    tmpls: list[TemplateEntry]
    flds: list[FieldEntry]
    css: str
    latex_pre: str = Field(..., alias="latexPre")
    latex_post: str = Field(..., alias="latexPost")
    latexsvg: bool = False
    req: list[tuple[int, str, list[int]]]
    tags: list[str] = Field(default_factory=list)
    vers: list[int] = Field(default_factory=list)


class DeckEntry(_Entry):
    """A deck keyed by its id in ``col.decks``."""

    id: int
    name: str
    desc: str = ""
    mod: int = 0
    usn: int = -1
    conf: int = DEFAULT_DECK_CONFIG_ID
    dyn: int = 0
    collapsed: bool = False
    browser_collapsed: bool = Field(False, alias="browserCollapsed")
    extend_new: int = Field(10, alias="extendNew")
    extend_rev: int = Field(50, alias="extendRev")
    new_today: list[int] = Field(default_factory=lambda: [0, 0], alias="newToday")
    rev_today: list[int] = Field(default_factory=lambda: [0, 0], alias="revToday")
    lrn_today: list[int] = Field(default_factory=lambda: [0, 0], alias="lrnToday")
    time_today: list[int] = Field(default_factory=lambda: [0, 0], alias="timeToday")


class NewCardConfig(_Entry):
    bury: bool = True
    delays: list[float] = Field(default_factory=lambda: [1.0, 10.0])
    initial_factor: int = Field(2500, alias="initialFactor")
    ints: list[int] = Field(default_factory=lambda: [1, 4, 7])
    order: int = 1
    per_day: int = Field(20, alias="perDay")
    separate: bool = True


class LapseConfig(_Entry):
    delays: list[float] = Field(default_factory=lambda: [10.0])
    leech_action: int = Field(0, alias="leechAction")
    leech_fails: int = Field(8, alias="leechFails")
    min_int: int = Field(1, alias="minInt")
    mult: float = 0.0


class ReviewConfig(_Entry):
    bury: bool = True
    ease4: float = 1.3
    fuzz: float = 0.05
    ivl_fct: float = Field(1.0, alias="ivlFct")
    max_ivl: int = Field(36500, alias="maxIvl")
    min_space: int = Field(1, alias="minSpace")
    per_day: int = Field(100, alias="perDay")


class DeckConfigEntry(_Entry):
    """Deck options group keyed by id in ``col.dconf``."""

    id: int = DEFAULT_DECK_CONFIG_ID
    name: str = "Default"
    mod: int = 0
    usn: int = 0
    autoplay: bool = True
    replayq: bool = True
    timer: int = 0
    max_taken: int = Field(60, alias="maxTaken")
    new: NewCardConfig = Field(default_factory=NewCardConfig)
    lapse: LapseConfig = Field(default_factory=LapseConfig)
    rev: ReviewConfig = Field(default_factory=ReviewConfig)


class CollectionConfig(_Entry):
    """Global collection configuration stored in ``col.conf``."""

    active_decks: list[int] = Field(
        default_factory=lambda: [DEFAULT_DECK_ID], alias="activeDecks"
    )
    cur_deck: int = Field(DEFAULT_DECK_ID, alias="curDeck")
    cur_model: str | None = Field(None, alias="curModel")
    add_to_cur: bool = Field(True, alias="addToCur")
    collapse_time: int = Field(1200, alias="collapseTime")
    due_counts: bool = Field(True, alias="dueCounts")
    est_times: bool = Field(True, alias="estTimes")
    new_bury: bool = Field(True, alias="newBury")
    new_spread: int = Field(0, alias="newSpread")
    next_pos: int = Field(1, alias="nextPos")
    sort_backwards: bool = Field(False, alias="sortBackwards")
    sort_type: str = Field("noteFld", alias="sortType")
    time_lim: int = Field(0, alias="timeLim")


def default_deck_entry(timestamp: float) -> DeckEntry:
    """The ``Default`` deck every Anki collection contains."""
    return DeckEntry(id=DEFAULT_DECK_ID, name="Default", mod=int(timestamp), usn=0)

"""Questionnaire model and answer tallying.

Each question pairs two statements, each tied to a role. The respondent
places a slider on a 7-position scale: position 3 is neutral, positions to
the left lean towards statement 1 and positions to the right towards
statement 2. The point table (default ``5 3 1 0 1 3 5``) converts a position
into 0-5 points for exactly one role.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ministry_roles.role_types import ROLE_ORDER, Role, Score
from ministry_roles.settings import NEUTRAL_POSITION, SCALE_POSITIONS, EngineSettings, load_settings


class UnknownQuestionError(ValueError):
    """A response references a question id that is not in the question set."""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class Statement(BaseModel):
    """One side of a question."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=5)
    role: Role


class Question(BaseModel):
    """A pair of statements the respondent weighs against each other."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    statement_1: Statement
    statement_2: Statement


class QuestionResponse(BaseModel):
    """Slider position chosen for one question."""

    question_id: int = Field(..., ge=1)
    value: int = Field(default=NEUTRAL_POSITION, ge=0, le=SCALE_POSITIONS - 1)


def _q(qid: int, text_1: str, role_1: Role, text_2: str, role_2: Role) -> Question:
    return Question(
        id=qid,
        statement_1=Statement(text=text_1, role=role_1),
        statement_2=Statement(text=text_2, role=role_2),
    )


# ---------------------------------------------------------------------------
# Pre-defined 40 questions
# ---------------------------------------------------------------------------
QUESTIONS: tuple[Question, ...] = (
    _q(
        1,
        "Het Koninkrijk zal groeien als mensen in hun bestemming lopen.",
        Role.APOSTLE,
        "Het Koninkrijk zal groeien als we begrijpen hoe de hemelse dimensie werkt.",
        Role.PROPHET,
    ),
    _q(
        2,
        "Mensen zeggen dat ze mijn creativiteit bewonderen.",
        Role.PROPHET,
        "Het Koninkrijk zal groeien als nieuwe mensen tot bekering komen.",
        Role.EVANGELIST,
    ),
    _q(
        3,
        "Wanneer ik enthousiast ben over iets, weet ik anderen daarin te betrekken.",
        Role.EVANGELIST,
        "Het Koninkrijk zal groeien als iedereen innerlijke genezing heeft gevonden.",
        Role.SHEPHERD,
    ),
    _q(
        4,
        "Ik luister zorgvuldig naar mensen en neem hun woorden goed in me op.",
        Role.SHEPHERD,
        "Het Koninkrijk zal groeien als mensen onderwezen worden uit de bijbel.",
        Role.TEACHER,
    ),
    _q(
        5,
        "Mensen vinden dat ik moeilijke onderwerpen en ideeën goed kan uitleggen.",
        Role.TEACHER,
        "Mensen noemen mij vaak proactief en ondernemend.",
        Role.APOSTLE,
    ),
    _q(
        6,
        "Ik neem graag het voortouw in het uitproberen van nieuwe dingen om anderen te inspireren.",
        Role.APOSTLE,
        "Mensen van diverse achtergronden voelen zich op hun gemak bij mij en omdat ik niet afschrik van hun waarderen of hun cultuur.",
        Role.EVANGELIST,
    ),
    _q(
        7,
        "Ik heb soms intuïtief kennis over dingen die anderen lijken te missen.",
        Role.PROPHET,
        "Ik hecht meer waarde aan het creëren van iets van betekenis dan aan het constant verdedigen van mijn eigen positie.",
        Role.SHEPHERD,
    ),
    _q(
        8,
        "Ik geniet ervan om mijn persoonlijke verhaal met anderen te delen.",
        Role.EVANGELIST,
        "Het delen van kennis met anderen vind ik erg leuk.",
        Role.TEACHER,
    ),
    _q(
        9,
        "Ik vind het fijn om een omgeving te scheppen waarin mensen zich veilig voelen en zich kunnen ontplooien.",
        Role.SHEPHERD,
        "Ik ben altijd beschikbaar om met frisse ideeën te komen.",
        Role.APOSTLE,
    ),
    _q(
        10,
        "Wanneer mensen iets niet snappen, leg ik het graag op verschillende manieren uit.",
        Role.TEACHER,
        "Soms word ik moedeloos door het gebrek aan inzicht of geloof bij anderen.",
        Role.PROPHET,
    ),
    _q(
        11,
        "Ik kan gemakkelijk doelen bepalen, strategieën uitwerken en een visie creëren om projecten te voltooien.",
        Role.APOSTLE,
        "Ik kan me frustreren aan… mensen die hun hart gesloten houden.",
        Role.SHEPHERD,
    ),
    _q(
        12,
        "Ik heb een scherp vermogen om de ware betekenis van dingen te begrijpen.",
        Role.PROPHET,
        "Ik kan me frustreren aan… mensen die snel tevreden zijn met weinig inzicht van de Bijbel.",
        Role.TEACHER,
    ),
    _q(
        13,
        "Ik vertel graag anderen over mijn geloofsovertuigingen.",
        Role.EVANGELIST,
        "Ik kan me frustreren aan… mensen die niet in beweging komen.",
        Role.APOSTLE,
    ),
    _q(
        14,
        "Wanneer ik eerlijk ben tegen mensen, zelfs als dat lastig is, merk ik vaak een positieve verandering in hun denken en handelen.",
        Role.SHEPHERD,
        "Ik kan me frustreren aan… mensen die niet onder indruk zijn van God.",
        Role.PROPHET,
    ),
    _q(
        15,
        "Ik krijg vaak te horen dat ik mensen nuttig heb geholpen bij het leren van waardevolle zaken.",
        Role.TEACHER,
        "Ik kan me frustreren aan… mensen die niet tot bekering komen.",
        Role.EVANGELIST,
    ),
    _q(
        16,
        "Veranderingen vind ik fijn, ook wanneer het anderen uit hun comfortzone haalt.",
        Role.APOSTLE,
        "Mijn ideale werkweek… bestaat uit een mengeling van routine, voorspelbare momenten en een planning.",
        Role.TEACHER,
    ),
    _q(
        17,
        "Ik voel me soms gedwongen de waarheid te spreken, zelfs als dit ongemakkelijk is voor anderen.",
        Role.PROPHET,
        "Mijn ideale werkweek… bevat afwisseling en avontuur. Dat houd scherp.",
        Role.APOSTLE,
    ),
    _q(
        18,
        "Ik probeer actief vriendschappen op te bouwen met mensen die anders zijn dan ik.",
        Role.EVANGELIST,
        "Mijn ideale werkweek… mag ik uitgedaagd worden, maar ik hou ook van tijd om indrukken te verwerken.",
        Role.PROPHET,
    ),
    _q(
        19,
        "Meestal kan ik me gebeurtenissen of namen nog goed herinneren, of weet ik op zijn minst waar ik iemand heb ontmoet.",
        Role.SHEPHERD,
        "Mijn ideale werkweek… sta ik open voor spontane zaken die op me afkomen.",
        Role.EVANGELIST,
    ),
    _q(
        20,
        "Ik werk liever met concrete feiten dan met theorieën.",
        Role.TEACHER,
        "Mijn ideale werkweek moet niet volgepland zijn, zodat ik genoeg tijd voor mensen heb.",
        Role.SHEPHERD,
    ),
    _q(
        21,
        "Ik geniet van uitdagende taken die inspanning en persoonlijke groei vereisen.",
        Role.APOSTLE,
        "Mijn geestelijke ervaringen komen vaak tot uiting in beelden of metaforen.",
        Role.PROPHET,
    ),
    _q(
        22,
        "Ik geniet ervan om te reflecteren en dieper na te denken over geestelijke zaken.",
        Role.PROPHET,
        "Ik voel me comfortabel bij diverse groepen mensen zonder de behoefte om mezelf aan te passen.",
        Role.EVANGELIST,
    ),
    _q(
        23,
        "Ik kan mensen goed overtuigen van waar ik zelf in geloof.",
        Role.EVANGELIST,
        "Als ik zie dat iemand hulp nodig heeft, bied ik snel mijn steun, vaak nog voordat erom gevraagd wordt.",
        Role.SHEPHERD,
    ),
    _q(
        24,
        "Wat anderen doormaken raakt me diep, zelfs als ik het zelf niet heb meegemaakt.",
        Role.SHEPHERD,
        "Ik leer anderen graag hoe ze dingen kunnen doen die ik goed beheers.",
        Role.TEACHER,
    ),
    _q(
        25,
        "Het geeft me voldoening om mijn inzichten met anderen te delen.",
        Role.TEACHER,
        "Ik droom er al lang van om een organisatie vanaf het begin op te zetten en mijn visie erin te verwerken.",
        Role.APOSTLE,
    ),
    _q(
        26,
        "Ik werk graag samen met… mensen die een geestelijk perspectief hebben.",
        Role.APOSTLE,
        "Ik ben bereid risico's te nemen wanneer iets voor mij echt belangrijk is.",
        Role.EVANGELIST,
    ),
    _q(
        27,
        "Ik werk graag samen met… mensen die visie hebben en mensen hierin meenemen.",
        Role.PROPHET,
        "Het geeft me voldoening om een plek te creëren waar mensen zich thuis voelen, deel van de groep uitmaken en weten dat er voor hen gezorgd wordt.",
        Role.SHEPHERD,
    ),
    _q(
        28,
        "Ik werk graag samen met… mensen die nieuwe bekeerlingen opvangen en bij elkaar houden.",
        Role.EVANGELIST,
        "Het afronden van een taak met oog voor detail geeft me veel voldoening.",
        Role.TEACHER,
    ),
    _q(
        29,
        "Ik werk graag samen met… mensen die waarheid onderwijzen.",
        Role.SHEPHERD,
        "Ik help graag teams en leiders om beter te functioneren en denk regelmatig na over hun efficiëntie.",
        Role.APOSTLE,
    ),
    _q(
        30,
        "Ik werk graag samen met… mensen die nieuwe mensen in de kerk brengen.",
        Role.TEACHER,
        "Sommige dromen die ik heb gehad, waren veel betekenisvoller dan gewone dromen.",
        Role.PROPHET,
    ),
    _q(
        31,
        "Mensen vinden vaak dat mijn woorden hen motiveert en ik moedig hen aan om nieuwe paden te bewandelen.",
        Role.APOSTLE,
        "Wanneer ik iemand voor het eerste ontmoet… zie ik de problemen en moeilijkheden waar die persoon mee worstelt.",
        Role.SHEPHERD,
    ),
    _q(
        32,
        "Er zijn momenten waarop ik mijn gedachten deel en mensen vertellen me later dat dit hen heeft geholpen.",
        Role.PROPHET,
        "Wanneer ik iemand voor het eerste ontmoet… wil ik graag helpen met het beantwoorden van geloofsvragen.",
        Role.TEACHER,
    ),
    _q(
        33,
        "Het gebeurt regelmatig dat ik mijn enthousiasme deel met mensen die ik tegenkom.",
        Role.EVANGELIST,
        "Wanneer ik iemand voor het eerste ontmoet… wordt ik getriggert door de potentie die nog is opgesloten.",
        Role.APOSTLE,
    ),
    _q(
        34,
        "Mensen kunnen op me rekenen voor langdurige zorg en steun, ook als anderen die hebben opgegeven.",
        Role.SHEPHERD,
        "Wanneer ik iemand voor het eerste ontmoet… ervaar ik inspiratie wat God wil duidelijk maken voor deze persoon.",
        Role.PROPHET,
    ),
    _q(
        35,
        "Ik haal veel plezier uit het zorgvuldig afmaken van een taak tot in de kleinste details.",
        Role.TEACHER,
        "Wanneer ik iemand voor het eerste ontmoet… ziet ik een strijder die mee gaat helpen de oogst binnen te halen.",
        Role.EVANGELIST,
    ),
    _q(
        36,
        "Ik ben een persoon met visie. Ik hou van de grote lijnen en kan deze goed overbrengen. Daardoor kom ik vaak in een leidinggevende positie terecht.",
        Role.APOSTLE,
        "Mensen vragen mij vaak om hulp wanneer ze iets beter willen begrijpen.",
        Role.TEACHER,
    ),
    _q(
        37,
        "Ik heb vaak een helder gevoel van wat ik moet zeggen wanneer iemand in een bepaalde situatie zit.",
        Role.PROPHET,
        "Het grotere geheel valt mij vaak eerder op dan de specifieke details wanneer ik iets lees.",
        Role.APOSTLE,
    ),
    _q(
        38,
        "In mijn enthousiasme wil ik mijn standpunt soms te graag op anderen overbrengen.",
        Role.EVANGELIST,
        "Ik onthul af en toe dingen die later meer betekenis krijgen dan op het moment zelf duidelijk was.",
        Role.PROPHET,
    ),
    _q(
        39,
        "Ik merk dat mensen regelmatig op me afstappen voor steun, een praatje of om hulp te vragen.",
        Role.SHEPHERD,
        "Wanneer een onderwerp van belang is voor mij, ga ik discussies erover niet uit de weg.",
        Role.EVANGELIST,
    ),
    _q(
        40,
        "Terwijl iemand praat, maak ik notities en luister ik zorgvuldig naar de details.",
        Role.TEACHER,
        "Ik ben bedachtzaam en neem de tijd om na te denken voordat ik spreek.",
        Role.SHEPHERD,
    ),
)


def get_question(question_id: int, questions: Sequence[Question] = QUESTIONS) -> Question | None:
    """Look up a question by ID."""
    return next((q for q in questions if q.id == question_id), None)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
def answer_points(
    question: Question,
    value: int,
    settings: EngineSettings | None = None,
) -> tuple[Role | None, int]:
    """Role credited by a slider position and the points it earns.

    The neutral position credits no role.
    """
    settings = settings or load_settings()
    if not 0 <= value < SCALE_POSITIONS:
        raise ValueError(f"Answer value must be between 0 and {SCALE_POSITIONS - 1}, got {value}")
    if value < NEUTRAL_POSITION:
        return question.statement_1.role, settings.answer_points[value]
    if value > NEUTRAL_POSITION:
        return question.statement_2.role, settings.answer_points[value]
    return None, 0


def calculate_role_scores(
    responses: Iterable[QuestionResponse],
    questions: Sequence[Question] = QUESTIONS,
    settings: EngineSettings | None = None,
) -> Score:
    """Tally responses into a Score. A repeated question counts its last answer.

    Raises:
        UnknownQuestionError: If a response references an unknown question.
    """
    settings = settings or load_settings()
    by_id = {q.id: q for q in questions}

    latest: dict[int, int] = {}
    for response in responses:
        if response.question_id not in by_id:
            raise UnknownQuestionError(f"Question with id '{response.question_id}' not found")
        latest[response.question_id] = response.value

    totals: dict[Role, int] = {role: 0 for role in ROLE_ORDER}
    for qid, value in latest.items():
        role, points = answer_points(by_id[qid], value, settings)
        if role is not None:
            totals[role] += points
    return Score.from_mapping(totals)


def questionnaire_progress(
    responses: Iterable[QuestionResponse],
    questions: Sequence[Question] = QUESTIONS,
) -> float:
    """Share of *questions* answered, in [0, 1]."""
    if not questions:
        return 0.0
    known = {q.id for q in questions}
    answered = {r.question_id for r in responses if r.question_id in known}
    return len(answered) / len(known)

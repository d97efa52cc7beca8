"""
Módulo que implementa o recorte de segmentos de linha 2D pelo algoritmo
Cohen-Sutherland.

O recorte é feito contra uma ClipWindow (retângulo alinhado aos eixos):
- compute_outcode: classifica um ponto em relação à janela (código de região).
- cohen_sutherland: laço de aceitação/rejeição/recorte sobre os dois extremos.
- clip_segment: ponto de entrada público, valida a entrada e delega.

Nenhuma função deste módulo desenha ou mantém estado entre chamadas.
"""

# clip_viewer/utils/clipping.py
import math
from enum import IntFlag
from typing import Optional, Tuple, Union

from ..exceptions import (
    ClipConvergenceError,
    DegenerateSegmentError,
    InvalidInputError,
)
from ..models.clip_window import ClipWindow

Point2D = Tuple[float, float]
Segment2D = Tuple[Point2D, Point2D]

# Cada passo de recorte resolve ao menos um bit; 4 bits por extremo.
MAX_CLIP_ITERATIONS = 8


class Outcode(IntFlag):
    """
    Código de região de Cohen-Sutherland.

    Os bits são independentes (um ponto pode estar LEFT | TOP), mas LEFT/RIGHT
    e BOTTOM/TOP nunca aparecem juntos: a classificação usa if/elif por eixo.
    """

    INSIDE = 0b0000
    LEFT = 0b0001
    RIGHT = 0b0010
    BOTTOM = 0b0100  # y < ymin
    TOP = 0b1000  # y > ymax


# Ordem fixa em que as bordas são resolvidas a cada passo.
BOUNDARY_PRIORITY = (Outcode.TOP, Outcode.BOTTOM, Outcode.RIGHT, Outcode.LEFT)


class ClipResult:
    """
    Resultado de um recorte: segmento aceito (recortado) ou rejeitado.

    Atributos:
        accepted: True se alguma parte do segmento é visível.
        segment: Extremos recortados ((x1, y1), (x2, y2)) ou None se rejeitado.
        iterations: Número de passos de recorte executados.
    """

    __slots__ = ("accepted", "segment", "iterations")

    def __init__(self, segment: Optional[Segment2D], iterations: int = 0):
        self.accepted: bool = segment is not None
        self.segment: Optional[Segment2D] = segment
        self.iterations: int = iterations

    @classmethod
    def accept(cls, segment: Segment2D, iterations: int = 0) -> "ClipResult":
        return cls(segment, iterations)

    @classmethod
    def reject(cls, iterations: int = 0) -> "ClipResult":
        return cls(None, iterations)

    def __bool__(self) -> bool:
        return self.accepted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClipResult):
            return NotImplemented
        return self.accepted == other.accepted and self.segment == other.segment

    def __repr__(self) -> str:
        if not self.accepted:
            return f"ClipResult(rejected, iterations={self.iterations})"
        return f"ClipResult(accepted={self.segment!r}, iterations={self.iterations})"


def compute_outcode(x: float, y: float, window: ClipWindow) -> Outcode:
    """
    Computa o código de região de um ponto em relação à janela de recorte.

    As comparações são estritas: pontos exatamente sobre uma borda são
    considerados dentro naquele eixo.

    Args:
        x: Coordenada x do ponto.
        y: Coordenada y do ponto.
        window: Janela de recorte.

    Returns:
        Outcode: Código de região do ponto (INSIDE se dentro).
    """
    code = Outcode.INSIDE
    if x < window.xmin:
        code |= Outcode.LEFT
    elif x > window.xmax:
        code |= Outcode.RIGHT
    if y < window.ymin:
        code |= Outcode.BOTTOM
    elif y > window.ymax:
        code |= Outcode.TOP
    return code


def _intersect_boundary(
    p1: Point2D, p2: Point2D, boundary: Outcode, window: ClipWindow
) -> Optional[Point2D]:
    """
    Calcula a interseção da reta p1-p2 com uma borda da janela.

    Returns:
        Optional[Point2D]: O ponto de interseção, ou None se o segmento for
                           paralelo à borda (denominador zero).
    """
    x1, y1 = p1
    x2, y2 = p2

    if boundary in (Outcode.TOP, Outcode.BOTTOM):
        dy = y2 - y1
        if dy == 0:
            return None
        y_edge = window.ymax if boundary == Outcode.TOP else window.ymin
        return (x1 + (x2 - x1) * (y_edge - y1) / dy, y_edge)

    dx = x2 - x1
    if dx == 0:
        return None
    x_edge = window.xmax if boundary == Outcode.RIGHT else window.xmin
    return (x_edge, y1 + (y2 - y1) * (x_edge - x1) / dx)


def _require_finite(point: Point2D, label: str) -> Point2D:
    try:
        x, y = float(point[0]), float(point[1])
    except (TypeError, ValueError, IndexError) as e:
        raise InvalidInputError(f"{label} inválido: {point!r}") from e
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidInputError(f"{label} possui coordenada não finita: {point!r}")
    return (x, y)


def cohen_sutherland(p1: Point2D, p2: Point2D, window: ClipWindow) -> ClipResult:
    """
    Recorta o segmento [p1, p2] contra a janela usando Cohen-Sutherland.

    A cada passo, o extremo fora da janela (p1 tem preferência) é movido
    para a interseção com uma única borda, escolhida na ordem TOP, BOTTOM,
    RIGHT, LEFT. Bordas paralelas ao segmento são puladas.

    Args:
        p1: Ponto inicial (x1, y1) do segmento.
        p2: Ponto final (x2, y2) do segmento.
        window: Janela de recorte.

    Returns:
        ClipResult: Segmento recortado (aceito) ou rejeitado.

    Raises:
        InvalidInputError: Se alguma coordenada não for finita.
        DegenerateSegmentError: Se nenhuma borda puder ser resolvida ou se a
                                interseção estourar para inf/NaN.
        ClipConvergenceError: Se o laço exceder MAX_CLIP_ITERATIONS passos.
    """
    x1, y1 = _require_finite(p1, "p1")
    x2, y2 = _require_finite(p2, "p2")

    code1 = compute_outcode(x1, y1, window)
    code2 = compute_outcode(x2, y2, window)
    steps = 0

    while True:
        if not (code1 | code2):  # Aceitação trivial
            return ClipResult.accept(((x1, y1), (x2, y2)), steps)
        if code1 & code2:  # Rejeição trivial: mesmo semiplano externo
            return ClipResult.reject(steps)
        if steps >= MAX_CLIP_ITERATIONS:
            raise ClipConvergenceError(
                f"Recorte não convergiu em {MAX_CLIP_ITERATIONS} passos para "
                f"{p1!r}-{p2!r} em {window!r}."
            )

        code_out = code1 if code1 else code2

        intersection = None
        for boundary in BOUNDARY_PRIORITY:
            if code_out & boundary:
                intersection = _intersect_boundary(
                    (x1, y1), (x2, y2), boundary, window
                )
                if intersection is not None:
                    break
        if intersection is None:
            raise DegenerateSegmentError(
                f"Nenhuma borda resolvível para o código {code_out!r} "
                f"no segmento ({x1}, {y1})-({x2}, {y2})."
            )
        # Coordenadas muito grandes podem estourar para inf e gerar NaN
        if not (math.isfinite(intersection[0]) and math.isfinite(intersection[1])):
            raise DegenerateSegmentError(
                f"Interseção não finita {intersection!r} no segmento "
                f"({x1}, {y1})-({x2}, {y2}): estouro de ponto flutuante."
            )

        if code_out == code1:
            x1, y1 = intersection
            code1 = compute_outcode(x1, y1, window)
        else:
            x2, y2 = intersection
            code2 = compute_outcode(x2, y2, window)
        steps += 1


def clip_segment(window: ClipWindow, segment: Union[Segment2D, object]) -> ClipResult:
    """
    Recorta um segmento contra a janela.

    Args:
        window: Janela de recorte (já validada na construção).
        segment: Tupla ((x1, y1), (x2, y2)) ou objeto com to_segment(),
                 como models.Line.

    Returns:
        ClipResult: Resultado do recorte.

    Raises:
        TypeError: Se window não for uma ClipWindow.
        InvalidInputError: Se o segmento for malformado ou não finito.
    """
    if not isinstance(window, ClipWindow):
        raise TypeError(f"window deve ser uma ClipWindow, não {type(window).__name__}.")
    if hasattr(segment, "to_segment"):
        segment = segment.to_segment()
    try:
        p1, p2 = segment
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Segmento inválido: {segment!r}") from e
    return cohen_sutherland(p1, p2, window)

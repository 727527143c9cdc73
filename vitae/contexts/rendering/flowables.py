"""
Custom reportlab flowables.

PaddedBox stacks child flowables vertically inside fixed margins and can be
split across pages between (or inside) its children.
"""

from typing import List, Sequence

from reportlab.platypus import Flowable, Spacer


class PaddedBox(Flowable):
    """
    Vertical run of flowables inset by top/right/bottom/left margins.

    Margins are in points. The box always takes the full available width;
    children are laid out in the width left after the horizontal margins and
    aligned inside it according to their own hAlign.
    """

    def __init__(
        self,
        content: Sequence[Flowable],
        top: float = 0,
        right: float = 0,
        bottom: float = 0,
        left: float = 0,
    ):
        Flowable.__init__(self)
        self.content: List[Flowable] = list(content)
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left
        self._placements = []

    def _inner_width(self, avail_width: float) -> float:
        return max(avail_width - self.left - self.right, 0)

    def _gap_before(self, index: int) -> float:
        if index == 0:
            return 0
        return self.content[index - 1].getSpaceAfter() + self.content[index].getSpaceBefore()

    def wrap(self, availWidth, availHeight):
        inner_width = self._inner_width(availWidth)
        canv = getattr(self, "canv", None)

        height = self.top
        self._placements = []
        for i, flowable in enumerate(self.content):
            gap = self._gap_before(i)
            width, child_height = flowable.wrapOn(
                canv, inner_width, max(availHeight - height - gap, 0)
            )
            self._placements.append((gap, width, child_height))
            height += gap + child_height
        height += self.bottom

        self.width = availWidth
        self.height = height
        return self.width, self.height

    def draw(self):
        inner_width = self._inner_width(self.width)
        y = self.height - self.top
        for flowable, (gap, width, child_height) in zip(self.content, self._placements):
            y -= gap + child_height
            flowable.drawOn(self.canv, self.left, y, _sW=inner_width - width)

    def split(self, availWidth, availHeight):
        inner_width = self._inner_width(availWidth)
        canv = getattr(self, "canv", None)

        remaining = availHeight - self.top
        head = []
        tail = []
        for i, flowable in enumerate(self.content):
            gap = self._gap_before(i) if head else 0
            _, child_height = flowable.wrapOn(canv, inner_width, max(remaining - gap, 0))
            if gap + child_height <= remaining:
                head.append(flowable)
                remaining -= gap + child_height
                continue

            parts = flowable.splitOn(canv, inner_width, remaining - gap) if remaining > gap else []
            if parts:
                head.append(parts[0])
                tail = list(parts[1:]) + self.content[i + 1 :]
            else:
                tail = self.content[i:]
            break

        if not head:
            return []
        if not tail:
            # Everything but the bottom margin fits here
            return [
                PaddedBox(head, self.top, self.right, 0, self.left),
                Spacer(0, self.bottom),
            ]
        return [
            PaddedBox(head, self.top, self.right, 0, self.left),
            PaddedBox(tail, 0, self.right, self.bottom, self.left),
        ]

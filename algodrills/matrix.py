"""Operations on rectangular integer matrices held as lists of rows."""

from __future__ import annotations


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    matrix.reverse()
    size = len(matrix)
    for i in range(size):
        for j in range(i + 1, len(matrix[i])):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]


def spiral_order(matrix: list[list[int]]) -> list[int]:
    """Return the elements in clockwise spiral order from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    left, right = 0, len(matrix[0]) - 1
    top, bottom = 0, len(matrix) - 1
    result: list[int] = []
    while left <= right and top <= bottom:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def flip_and_invert_image(image: list[list[int]]) -> list[list[int]]:
    """Mirror each row of a binary image and invert its bits, in place."""
    for row in image:
        row.reverse()
        row[:] = [bit ^ 1 for bit in row]
    return image
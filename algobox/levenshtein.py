"""Edit distance between two strings."""


def levenshtein(source: str, target: str) -> int:
    """Fewest single-character insertions, deletions and substitutions
    that turn source into target."""
    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            if source_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]
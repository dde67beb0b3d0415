class BalancedRegionScanner(object):
    """
    Locates top-level balanced regions like "(...)" or "<...>" in declaration text.
    Nesting is tracked with a depth counter, so arbitrary nesting levels are supported.
    Unbalanced input is not an error: a closing delimiter at depth 0 is ignored and
    an opening delimiter that never closes yields no region.
    """

    @staticmethod
    def findTopLevelSpans(text, open_char, close_char):
        spans = []
        depth = 0
        region_start = 0
        for index, char in enumerate(text):
            if char == open_char:
                if depth == 0:
                    region_start = index
                depth += 1
            elif char == close_char and depth > 0:
                depth -= 1
                if depth == 0:
                    spans.append((region_start, index + 1))
        return spans

    @staticmethod
    def findTopLevelRegions(text, open_char, close_char):
        return [text[start:end] for start, end in BalancedRegionScanner.findTopLevelSpans(text, open_char, close_char)]

    @staticmethod
    def removeTopLevelRegions(text, open_char, close_char):
        remaining = []
        offset = 0
        for start, end in BalancedRegionScanner.findTopLevelSpans(text, open_char, close_char):
            remaining.append(text[offset:start])
            offset = end
        remaining.append(text[offset:])
        return "".join(remaining)

def _source_total_text(view):
    total = view.get_total_line_numbers()
    if total is not None:
        return str(total)
    approx = view.get_total_line_numbers_approx()
    if approx is not None:
        return f"~{approx}"
    return "?"


def render_status(view, width, status_msg=None):
    """
    A pending status message (e.g. a failed reload) wins over the usual
    position / filter / timing summary.
    """
    if status_msg:
        text = f" {status_msg}"
    else:
        offset = view.selected_offset()
        position = "-" if offset is None else str(offset + 1)
        if view.is_filter():
            # position counts within the matches
            parts = [
                f"Row {position}/{view.get_total()}",
                f"[filtered from {_source_total_text(view)}]",
            ]
        else:
            parts = [f"Row {position}/{_source_total_text(view)}"]

        columns_filter = view.columns_filter()
        if columns_filter is not None:
            if columns_filter.disabled_because_no_match():
                parts.append(f"[cols: no match for {columns_filter.pattern.pattern!r}]")
            else:
                parts.append(
                    f"[cols {columns_filter.num_filtered()}/{columns_filter.num_original()}]"
                )

        elapsed = view.elapsed()
        if elapsed is not None:
            parts.append(f"({elapsed / 1000:.1f}ms)")
        text = " " + " ".join(parts)

    return text.ljust(width)[:width]

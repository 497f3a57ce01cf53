from wikicontext.domain.visited_tracker import VisitedTracker


def test_url_not_visited_initially():
    tracker = VisitedTracker()
    assert not tracker.is_visited("https://example.com")


def test_marking_url_makes_it_visited():
    tracker = VisitedTracker()
    tracker.mark("https://example.com")
    assert tracker.is_visited("https://example.com")


def test_different_urls_tracked_independently():
    tracker = VisitedTracker()
    tracker.mark("https://example.com")
    assert tracker.is_visited("https://example.com")
    assert not tracker.is_visited("https://other.com")


def test_marking_same_url_twice_is_idempotent():
    tracker = VisitedTracker()
    tracker.mark("https://example.com")
    tracker.mark("https://example.com")
    assert tracker.is_visited("https://example.com")
    assert len(tracker) == 1


def test_mark_if_new_reports_first_visit_only():
    tracker = VisitedTracker()
    assert tracker.mark_if_new("https://example.com/a") is True
    assert tracker.mark_if_new("https://example.com/a") is False
    assert tracker.mark_if_new("https://example.com/b") is True


def test_urls_keep_first_visit_order():
    tracker = VisitedTracker()
    for url in ["https://x/3", "https://x/1", "https://x/3", "https://x/2"]:
        tracker.mark(url)
    assert tracker.urls() == ["https://x/3", "https://x/1", "https://x/2"]


def test_clear_forgets_everything():
    tracker = VisitedTracker()
    tracker.mark("https://example.com")
    tracker.clear()
    assert len(tracker) == 0
    assert not tracker.is_visited("https://example.com")

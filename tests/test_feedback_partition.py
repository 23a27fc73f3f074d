from sme_insights.feedback import (
    feedback_summary,
    partition_feedback,
    retrieve_feedback_for_analysis,
    submit_feedback,
)


def _fill(store, sample_input, sample_output, ratings):
    return [
        submit_feedback(store, sample_input, sample_output, r)
        for r in ratings
    ]


def test_partition_covers_every_record_once(store, sample_input, sample_output):
    records = _fill(
        store, sample_input, sample_output,
        ["helpful", "not_helpful", "not_helpful", "helpful", "helpful"],
    )

    partition = partition_feedback(records)

    assert len(partition.helpful) + len(partition.not_helpful) + len(partition.other) == len(records)
    assert all(r.feedback.value == "helpful" for r in partition.helpful)
    assert all(r.feedback.value == "not_helpful" for r in partition.not_helpful)
    assert partition.other == []


def test_partition_keeps_insertion_order(store, sample_input, sample_output):
    records = _fill(store, sample_input, sample_output, ["helpful", "not_helpful", "helpful"])

    partition = partition_feedback(records)

    assert partition.helpful == [records[0], records[2]]
    assert partition.not_helpful == [records[1]]


def test_partition_empty():
    partition = partition_feedback([])
    assert len(partition) == 0


def test_retrieve_feedback_for_analysis_reads_store(store, sample_input, sample_output):
    _fill(store, sample_input, sample_output, ["not_helpful"])

    partition = retrieve_feedback_for_analysis(store)

    assert len(partition.not_helpful) == 1
    assert partition.helpful == []


def test_feedback_summary(store, sample_input, sample_output):
    assert feedback_summary([])["helpful_ratio"] is None

    records = _fill(store, sample_input, sample_output, ["helpful", "helpful", "not_helpful", "helpful"])
    summary = feedback_summary(records)

    assert summary["total"] == 4
    assert summary["helpful"] == 3
    assert summary["not_helpful"] == 1
    assert summary["helpful_ratio"] == 0.75

import unittest
from fnswarm.exceptions import LabelAnnotationConflict
from fnswarm.labels import build_labels


class TestBuildLabels(unittest.TestCase):
    """
    Test class for the build_labels function
    """

    def test_system_labels_only(self):
        """ Test a function without labels nor annotations gets the system labels """
        self.assertEqual(build_labels("figlet"), {
            "com.openfaas.function": "figlet",
            "function": "true"
        })

    def test_merge_labels_and_annotations(self):
        """ Test merged labels hold system labels, user labels and prefixed annotations """
        labels = {"team": "text", "com.openfaas.scale.min": "2"}
        annotations = {"topic": "fonts", "owner": "alice"}

        merged = build_labels("figlet", labels, annotations)

        self.assertEqual(merged, {
            "com.openfaas.function": "figlet",
            "function": "true",
            "team": "text",
            "com.openfaas.scale.min": "2",
            "com.openfaas.annotations.topic": "fonts",
            "com.openfaas.annotations.owner": "alice"
        })
        self.assertEqual(len(merged), 2 + len(labels) + len(annotations))

    def test_user_labels_overwrite_system_labels(self):
        """ Test user labels may replace the system labels """
        merged = build_labels("figlet", {"function": "false", "com.openfaas.function": "other"})
        self.assertEqual(merged["function"], "false")
        self.assertEqual(merged["com.openfaas.function"], "other")

    def test_annotation_clashing_with_label_raises(self):
        """ Test an annotation whose prefixed key is already a label raises LabelAnnotationConflict """
        with self.assertRaises(LabelAnnotationConflict) as cm:
            build_labels("figlet",
                         {"com.openfaas.annotations.topic": "text"},
                         {"topic": "fonts"})
        self.assertEqual(cm.exception.key, "topic")
        self.assertEqual(cm.exception.label_key, "com.openfaas.annotations.topic")
        self.assertIn("topic", str(cm.exception))

    def test_custom_prefix(self):
        """ Test annotations are stored under the given prefix """
        merged = build_labels("figlet", annotations={"topic": "fonts"}, annotation_prefix="example.com/")
        self.assertEqual(merged["example.com/topic"], "fonts")

    def test_inputs_are_not_modified(self):
        """ Test the user labels are copied """
        labels = {"team": "text"}
        build_labels("figlet", labels, {"topic": "fonts"})
        self.assertEqual(labels, {"team": "text"})

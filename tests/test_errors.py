import unittest

from tournament_scan.errors import InvalidImage, NoTextFound, OcrFailed, ScannerError


class TestScannerErrors(unittest.TestCase):
    def test_default_message(self):
        error = NoTextFound()

        self.assertEqual(error.message, "No text found in the image.")
        self.assertEqual(str(error), error.message)

    def test_custom_message_exposed(self):
        error = InvalidImage("Image file not found: listing.png")

        self.assertEqual(error.message, "Image file not found: listing.png")
        self.assertEqual(str(error), error.message)
        self.assertEqual(InvalidImage.message, "Could not process the image.")

    def test_ocr_failure_keeps_cause(self):
        cause = TimeoutError("read timed out")

        error = OcrFailed(cause)

        self.assertIs(error.cause, cause)
        self.assertEqual(error.message, "OCR failed: read timed out")
        self.assertIsInstance(error, ScannerError)


if __name__ == "__main__":
    unittest.main()

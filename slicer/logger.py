# slicer/logger.py

import csv
import time

class SlicerLogger:
    """
    Logs slicing events (slices cut, cells wasted, run start/end) to CSV.
    Also handles timing.
    """
    def __init__(self, log_file="slicer_log.csv"):
        self.log_file = log_file
        self.file_handle = None
        self.csv_writer = None
        self.start_time = time.time()

    def open(self):
        self.start_time = time.time()
        self.file_handle = open(self.log_file, "w", newline="")
        self.csv_writer = csv.writer(self.file_handle)
        # write header
        self.csv_writer.writerow(["timestamp","event","anchor","weight","details"])

    def close(self):
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None
            self.csv_writer = None

    def log_event(self, event, anchor, weight, details=""):
        """
        anchor: Cell the tree was grown from, written as "row,col" (blank for run-level events)
        weight: score of the chosen node for SliceCut, blank otherwise
        details: free text, e.g. the cut rectangle "r1 c1 r2 c2"
        """
        if not self.csv_writer:
            return
        t = time.time() - self.start_time
        anchor_str = "" if anchor is None else f"{anchor.row},{anchor.col}"
        self.csv_writer.writerow([f"{t:.2f}", event, anchor_str, weight, details])
        self.file_handle.flush()

    def __del__(self):
        self.close()

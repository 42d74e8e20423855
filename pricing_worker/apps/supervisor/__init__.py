"""
Supervisor App - Worker Pool

Responsibilities:
- Spawn WORKER_COUNT isolated worker processes on the shared events queue
- Collect [timestamp_ms, index, fingerprint] results from the result channel
- Write the run report CSV once every worker has stopped
- Notice workers that exited abnormally

Outputs:
- OUTPUT_DIR/python-[timestamp_ms].csv
"""

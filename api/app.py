import datetime
import os
import threading
import uuid

from flask import Flask, jsonify, request

from api.audio_utils import audio_duration_seconds
from api.file_utils import get_temp_filepath, remove_quietly
from read_scoring import assess
from read_scoring.asr import default_recognizer, parse_recognizer_output
from read_scoring.exceptions import InvalidInputError
from read_scoring.utils.logging import get_logger, setup_logging
from read_scoring.utils.numbers import safe_number

logger = get_logger("read_scoring.api")

app = Flask(__name__)
# Recognizer strategy used for audio submissions; swap for tests or other engines
app.config["RECOGNIZER"] = default_recognizer()

# ============================================================================
# JOB QUEUE SYSTEM
# ============================================================================
JOB_STORE = {}  # {job_id: {status, result, error, audio_path, created_at}}


def run_assessment_job(job_id, audio_path, reference_text, recognizer=None):
    """Background worker: recognize the upload, then assess it."""
    if recognizer is None:
        recognizer = app.config["RECOGNIZER"]
    try:
        JOB_STORE[job_id]['status'] = 'processing'

        duration = audio_duration_seconds(audio_path)
        words = recognizer.transcribe(audio_path, fallback_duration=duration)
        report = assess(reference_text, words)

        JOB_STORE[job_id]['status'] = 'complete'
        JOB_STORE[job_id]['result'] = report.to_dict()
    except Exception as e:
        logger.exception("Assessment job %s failed", job_id)
        JOB_STORE[job_id]['status'] = 'failed'
        JOB_STORE[job_id]['error'] = str(e)
    finally:
        remove_quietly(audio_path)


# ============================================================================
# ROUTES
# ============================================================================
@app.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok"})


@app.route('/api/assess', methods=['POST'])
def assess_transcript():
    """Assess an already-recognized transcript.

    Body: {"referenceText": str, "recognizedWords": [...]} or
          {"referenceText": str, "recognizerOutput": {...}, "duration": float}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    reference_text = data.get('referenceText', '')
    try:
        if 'recognizerOutput' in data:
            duration = safe_number(data.get('duration'), 0.0)
            words = parse_recognizer_output(data['recognizerOutput'], fallback_duration=duration)
        else:
            words = data.get('recognizedWords', [])
        report = assess(reference_text, words)
    except InvalidInputError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(report.to_dict())


@app.route('/check', methods=['POST'])
def check():
    """Submit audio for async assessment. Returns job_id immediately."""
    if 'audio' not in request.files:
        return jsonify({"error": "No audio file"}), 400

    file = request.files['audio']
    text = request.form.get('text', '')

    job_id = str(uuid.uuid4())[:8]
    audio_path = get_temp_filepath(f'upload_{job_id}', 'wav')
    file.save(audio_path)

    JOB_STORE[job_id] = {
        'status': 'queued',
        'result': None,
        'error': None,
        'audio_path': audio_path,
        'created_at': datetime.datetime.now().isoformat()
    }

    thread = threading.Thread(
        target=run_assessment_job,
        args=(job_id, audio_path, text, app.config["RECOGNIZER"]),
        daemon=True
    )
    thread.start()

    return jsonify({
        "status": "queued",
        "job_id": job_id,
        "message": "Processing started. Poll /check/status/<job_id> for results."
    })


@app.route('/check/status/<job_id>', methods=['GET'])
def check_status(job_id):
    """Get status of an assessment job; a finished job is removed once reported."""
    if job_id not in JOB_STORE:
        return jsonify({"error": "Job not found"}), 404

    job = JOB_STORE[job_id]
    response = {"job_id": job_id, "status": job['status']}

    if job['status'] == 'complete':
        response['result'] = job['result']
    elif job['status'] == 'failed':
        response['error'] = job['error']

    # Finished jobs are handed out once, then dropped
    if job['status'] in ('complete', 'failed'):
        JOB_STORE.pop(job_id, None)

    return jsonify(response)


if __name__ == '__main__':
    setup_logging(os.getenv("LOG_LEVEL", "INFO"), log_file=os.getenv("LOG_FILE"))
    app.run(debug=False, host='0.0.0.0', port=int(os.getenv("PORT", "5000")))

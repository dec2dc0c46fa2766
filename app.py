"""
Simple web frontend for NoteForge.
Pick a subject, topic and level, get study notes, export them to PDF or Word.
"""

from flask import Flask, request, render_template_string, send_file, jsonify
import io

from prompt_template import NoteLevel, parse_level
from generator import generate_notes, GenerationError
from history import HistoryStore, NoteData
from html_renderer import render_html, word_count
from pdf_renderer import render_pdf, export_filename
from docx_renderer import render_docx
from settings import load_settings

DOCX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'

settings = load_settings()

app = Flask(__name__)
app.config['SETTINGS'] = settings
app.config['HISTORY_PATH'] = settings.history_path


def history_store() -> HistoryStore:
    return HistoryStore(app.config['HISTORY_PATH'])


HTML_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <title>NoteForge AI</title>
    <style>
        * { box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 1100px;
            margin: 40px auto;
            padding: 20px;
            background: #f8fafc;
            color: #1e293b;
        }
        h1.brand { margin-bottom: 30px; }
        h1.brand span { color: #0284c7; }
        .layout { display: grid; grid-template-columns: 320px 1fr; gap: 24px; }
        .section {
            background: white;
            padding: 20px;
            border-radius: 12px;
            margin-bottom: 20px;
            border: 1px solid #e2e8f0;
        }
        label { display: block; font-weight: 600; margin-bottom: 6px; font-size: 14px; }
        input[type="text"] {
            width: 100%;
            padding: 10px;
            border: 1px solid #cbd5e1;
            border-radius: 8px;
            margin-bottom: 14px;
        }
        .levels { display: grid; grid-template-columns: repeat(3, 1fr); gap: 6px; margin-bottom: 16px; }
        .levels button { background: #f1f5f9; color: #64748b; font-size: 11px; padding: 8px 4px; }
        .levels button.active { background: #0284c7; color: white; }
        button {
            background: #0284c7;
            color: white;
            border: none;
            padding: 12px 20px;
            border-radius: 8px;
            cursor: pointer;
            font-weight: 600;
        }
        button:hover { background: #0369a1; }
        button:disabled { background: #94a3b8; cursor: not-allowed; }
        .btn-secondary { background: #f1f5f9; color: #475569; }
        .btn-secondary:hover { background: #e2e8f0; }
        .full { width: 100%; margin-bottom: 8px; }
        .error { color: #b91c1c; background: #fef2f2; padding: 12px; border-radius: 8px; }
        .history-item {
            display: block;
            width: 100%;
            text-align: left;
            background: white;
            color: #1e293b;
            border: 1px solid #f1f5f9;
            margin-bottom: 8px;
            font-weight: 400;
        }
        .history-item:hover { background: #f0f9ff; }
        .history-item small { display: block; color: #94a3b8; font-size: 10px; text-transform: uppercase; }
        .notes-header { display: flex; justify-content: space-between; align-items: center; gap: 12px; }
        .notes-meta { font-size: 11px; color: #94a3b8; }
        .notes-footer { border-top: 1px solid #f1f5f9; margin-top: 24px; padding-top: 12px; font-size: 11px; color: #94a3b8; }
        .hidden { display: none; }
        /* Rendered note blocks */
        .note-h1 { font-size: 32px; border-bottom: 1px solid #e2e8f0; padding-bottom: 12px; }
        .note-h2 { font-size: 24px; margin-top: 40px; border-left: 6px solid #0ea5e9; padding-left: 10px; }
        .note-h3 { font-size: 19px; margin-top: 28px; text-decoration: underline; text-decoration-color: #bae6fd; }
        .note-p { line-height: 1.9; margin-bottom: 18px; }
        .note-li { margin-left: 24px; margin-bottom: 10px; }
        .list-decimal { list-style-type: decimal; background: #f0f9ff; padding: 10px; border-left: 4px solid #bae6fd; }
        .list-disc { list-style-type: disc; }
        .note-quote {
            font-style: italic;
            background: #f8fafc;
            border-left: 4px solid #cbd5e1;
            margin: 20px 0;
            padding: 14px;
        }
        .note-spacer { height: 24px; }
        .note-code {
            background: #f1f5f9;
            font-family: monospace;
            font-size: 13px;
            color: #0369a1;
            padding: 2px 6px;
            border-radius: 4px;
        }
    </style>
</head>
<body>
    <h1 class="brand">NoteForge <span>AI</span></h1>
    <div class="layout">
        <div>
            <div class="section">
                <form id="generate-form">
                    <label for="subject">Subject</label>
                    <input type="text" id="subject" placeholder="e.g. Mechanical Engineering" required>
                    <label for="topic">Topic</label>
                    <input type="text" id="topic" placeholder="e.g. Engine Assembly Workflow" required>
                    <label>Complexity Level</label>
                    <div class="levels">
                        {% for level in levels %}
                        <button type="button" data-level="{{ level.value }}"
                                class="{{ 'active' if level.value == default_level else '' }}">{{ level.value }}</button>
                        {% endfor %}
                    </div>
                    <button type="submit" id="generate-btn" class="full">Generate Notes</button>
                    <button type="button" id="reset-btn" class="full btn-secondary">Reset Form</button>
                </form>
            </div>
            <div class="section {{ '' if history else 'hidden' }}" id="history-section">
                <label>Recent Notes</label>
                <div id="history-list">
                    {% for note in history %}
                    <button class="history-item" data-index="{{ loop.index0 }}">
                        {{ note.topic }}<small>{{ note.subject }}{% if note.level %} &bull; {{ note.level.value }}{% endif %}</small>
                    </button>
                    {% endfor %}
                </div>
            </div>
        </div>
        <div>
            <div id="error" class="error hidden"></div>
            <div id="notes" class="section hidden">
                <div class="notes-header">
                    <div>
                        <div class="notes-meta" id="notes-subject"></div>
                        <h2 id="notes-topic"></h2>
                        <div class="notes-meta" id="notes-timestamp"></div>
                    </div>
                    <div>
                        <button type="button" class="btn-secondary" id="pdf-btn">PDF</button>
                        <button type="button" id="docx-btn">Word</button>
                    </div>
                </div>
                <article class="note-body" id="notes-body"></article>
                <div class="notes-footer"><span id="notes-words"></span></div>
            </div>
        </div>
    </div>
    <script>
        let notesHistory = {{ history_json|tojson }};
        let currentNote = null;
        let level = {{ default_level|tojson }};

        const $ = (id) => document.getElementById(id);

        const defaultLevel = level;

        function selectLevel(value) {
            level = value;
            document.querySelectorAll('.levels button').forEach(b => b.classList.toggle('active', b.dataset.level === value));
        }

        document.querySelectorAll('.levels button').forEach(btn => {
            btn.addEventListener('click', () => selectLevel(btn.dataset.level));
        });

        function showError(message) {
            $('error').textContent = message;
            $('error').classList.toggle('hidden', !message);
        }

        async function showNote(note) {
            currentNote = note;
            const res = await fetch('/render', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({content: note.content})
            });
            const data = await res.json();
            $('notes-subject').textContent = note.subject + (note.level ? ' • ' + note.level : '');
            $('notes-topic').textContent = note.topic;
            $('notes-timestamp').textContent = note.timestamp;
            $('notes-body').innerHTML = data.html;
            $('notes-words').textContent = data.words + ' Words';
            $('notes').classList.remove('hidden');
        }

        function renderHistory() {
            const list = $('history-list');
            list.innerHTML = '';
            notesHistory.forEach((note, i) => {
                const btn = document.createElement('button');
                btn.className = 'history-item';
                btn.dataset.index = i;
                btn.textContent = note.topic;
                const meta = document.createElement('small');
                meta.textContent = note.subject + (note.level ? ' • ' + note.level : '');
                btn.appendChild(meta);
                list.appendChild(btn);
            });
            $('history-section').classList.toggle('hidden', notesHistory.length === 0);
        }

        $('history-list').addEventListener('click', (e) => {
            const btn = e.target.closest('.history-item');
            if (!btn) return;
            const note = notesHistory[Number(btn.dataset.index)];
            $('subject').value = note.subject;
            $('topic').value = note.topic;
            selectLevel(note.level || defaultLevel);
            showNote(note);
            window.scrollTo({top: 0, behavior: 'smooth'});
        });

        $('generate-form').addEventListener('submit', async (e) => {
            e.preventDefault();
            const btn = $('generate-btn');
            btn.disabled = true;
            btn.textContent = 'Generating...';
            showError('');
            try {
                const res = await fetch('/generate', {
                    method: 'POST',
                    headers: {'Content-Type': 'application/json'},
                    body: JSON.stringify({subject: $('subject').value, topic: $('topic').value, level: level})
                });
                const data = await res.json();
                if (!res.ok) {
                    showError(data.error || 'An unexpected error occurred');
                    return;
                }
                notesHistory = data.history;
                renderHistory();
                await showNote(data.note);
            } catch (err) {
                showError('An unexpected error occurred');
            } finally {
                btn.disabled = false;
                btn.textContent = 'Generate Notes';
            }
        });

        $('reset-btn').addEventListener('click', () => {
            $('subject').value = '';
            $('topic').value = '';
            selectLevel(defaultLevel);
            currentNote = null;
            $('notes').classList.add('hidden');
            showError('');
        });

        async function download(kind) {
            if (!currentNote) return;
            const res = await fetch('/export/' + kind, {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({title: currentNote.topic, content: currentNote.content})
            });
            if (!res.ok) {
                showError('Export failed');
                return;
            }
            const disposition = res.headers.get('Content-Disposition') || '';
            const match = disposition.match(/filename=\"?([^\";]+)\"?/);
            const blob = await res.blob();
            const a = document.createElement('a');
            a.href = URL.createObjectURL(blob);
            a.download = match ? match[1] : 'notes.' + kind;
            a.click();
            URL.revokeObjectURL(a.href);
        }

        $('pdf-btn').addEventListener('click', () => download('pdf'));
        $('docx-btn').addEventListener('click', () => download('docx'));
    </script>
</body>
</html>
"""


@app.route('/')
def index():
    history = history_store().load()
    return render_template_string(
        HTML_TEMPLATE,
        levels=list(NoteLevel),
        default_level=NoteLevel.INTERMEDIATE.value,
        history=history,
        history_json=[note.to_dict() for note in history]
    )


@app.route('/generate', methods=['POST'])
def generate():
    data = request.get_json(silent=True) or {}
    subject = (data.get('subject') or '').strip()
    topic = (data.get('topic') or '').strip()

    if not subject or not topic:
        return jsonify({'error': 'Subject and topic are required'}), 400

    try:
        level = parse_level(data.get('level'))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    current = app.config['SETTINGS']
    try:
        content = generate_notes(
            subject,
            topic,
            level,
            api_key=current.api_key,
            model=current.model,
            max_tokens=current.max_tokens
        )
    except GenerationError as e:
        return jsonify({'error': str(e)}), 502

    # History only changes once a complete note is in hand
    note = NoteData.create(subject, topic, level, content)
    history = history_store().record(note)

    return jsonify({
        'note': note.to_dict(),
        'html': str(render_html(content)),
        'words': word_count(content),
        'history': [item.to_dict() for item in history]
    })


@app.route('/render', methods=['POST'])
def render():
    data = request.get_json(silent=True) or {}
    content = data.get('content') or ''
    return jsonify({'html': str(render_html(content)), 'words': word_count(content)})


@app.route('/history')
def history():
    return jsonify({'history': [note.to_dict() for note in history_store().load()]})


def _export_request():
    data = request.get_json(silent=True) or {}
    content = data.get('content') or ''
    title = (data.get('title') or '').strip() or 'Study'
    return data, title, content


@app.route('/export/pdf', methods=['POST'])
def export_pdf():
    _, title, content = _export_request()

    if not content:
        return jsonify({'error': 'No note content provided'}), 400

    return send_file(
        io.BytesIO(render_pdf(title, content)),
        mimetype='application/pdf',
        as_attachment=True,
        download_name=export_filename(title, 'pdf')
    )


@app.route('/export/docx', methods=['POST'])
def export_docx():
    data, title, content = _export_request()

    if not content:
        return jsonify({'error': 'No note content provided'}), 400

    return send_file(
        io.BytesIO(render_docx(title, content, span_runs=data.get('span_runs') is True)),
        mimetype=DOCX_MIMETYPE,
        as_attachment=True,
        download_name=export_filename(title, 'docx')
    )


if __name__ == '__main__':
    print("\n" + "="*50)
    print("  NoteForge AI")
    print(f"  Open: http://localhost:{settings.port}")
    print(f"  Model: {settings.model}")
    print(f"  API key: {'set' if settings.api_key else 'not set (export ANTHROPIC_API_KEY)'}")
    print(f"  History: {settings.history_path}")
    print("="*50 + "\n")
    app.run(debug=settings.debug, host='0.0.0.0', port=settings.port)

"""Manual page of the Referencer plugin (mono and stereo builds).

Stereo builds add monitoring modes, stereo analysis and the Monitoring
section; the mono build shows the audio sample graph in the Source section
instead. Nested option lists live inside their parent list item.
"""

from plugdoc.models.nodes import Container, b, document, li, mono, p, stereo, ul

_FEATURES = ul(
    li(
        "Loading of up to 4 audio files as reference tracks with playback of 4 independent "
        "loops per each file and simple switch between files and loops using the ",
        b("sample-loop matrix"),
        ".",
    ),
    li(
        "Simple switch between the Mix sound and selected Reference sound. "
        "Possibility to mix the Mix and Reference signals together."
    ),
    li("Automatic gain matching between Mix and Reference sounds."),
    stereo(li("Different monitoring modes of stereo signal."), label="monitoring-modes"),
    li("Pre- or post-filtering of the signal for listening the specific band of the audio spectrum."),
    li(
        "Measurement of such important parameters as: ",
        b("Peak"), " and ", b("True Peak"), " levels, ", b("RMS"), ", ",
        b("Momentary"), ", ", b("Short-Term"), " and ", b("Integrated"), " LUFS.",
    ),
    li("Waveform analysis using linear or logarithmic scale."),
    li(
        "Spectrum analysis",
        stereo(
            " of ", b("Left"), ", ", b("Right"), ", ", b("Mid"), ", ", b("Side"),
            " parts of the stereo signal",
            label="spectrum-parts",
        ),
        ".",
    ),
    li(
        "Dynamics measurement - the measurement of the PSR (Peak-to-Short-Term Loudness Ratio) "
        "value as it is defined in the AES Convention 143 Brief 373 and its distribution."
    ),
    stereo(
        li("Correlation and spectral correlation between left and right channels of the stereo track."),
        li("Goniometer for analyzing the stereo image of the track."),
        li(
            "Stereo analysis that allows to analyze overall and spectral panorama between ",
            b("Left"), " and ", b("Right"), " channels.",
        ),
        li(
            "Stereo analysis that allows to analyze the overall and spectral balance between the ",
            b("Mid"), " and ", b("Side"), " parts of the stereo signal.",
        ),
        label="stereo-analysis",
    ),
)

_AUDIO_SAMPLE_GRAPH = li(
    b("Audio sample graph"),
    " - the widget that allows to load currently selected audio file and monitor the playback "
    "of the currently selected loop.",
)

_SOURCE = ul(
    li(b("Mix"), " - the button that switches the referencer to play the input mix."),
    li(b("Ref"), " - the button that switches the referencer to play the currently selected reference loop."),
    li(
        b("Both"),
        " - the button that allows to mix both the input mix and the reference loop. "
        "When used, the mix and reference loop are attenuated by -3 dB.",
    ),
    li(b("Play"), " - the play button that resumes the playback of currently selected loop."),
    li(b("Stop"), " - the stop button that stops the playback of currently selected loop."),
    li(
        b("Gain Matching"),
        " - the combo box that allows to set-up gain matching:",
        ul(
            li(b("None"), " - the gain matching is not applied."),
            li(
                b("Reference"),
                " - the gain of the reference signal is adjusted to match the loudness of the mix signal.",
            ),
            li(
                b("Mix"),
                " - the gain of the mix signal is adjusted to match the loudness of the reference signal.",
            ),
        ),
    ),
    li(b("Reactivity"), " - the speed of how quickly the gain is adjusted when matching the loudness."),
    mono(_AUDIO_SAMPLE_GRAPH, label="source-sample-graph"),
)

_MONITORING = stereo(
    p(b("Monitoring"), " section:"),
    ul(
        li(b("Stereo"), " - audio signal is played as a regular stereo."),
        li(b("Reverse Stereo"), " - the left and right audio channels of the stereo output are swapped together."),
        li(
            b("Mono"),
            " - both left and right outputs contain audio signal converted to mono "
            "(or Mid part of the signal).",
        ),
        li(b("Side"), " - both left and right outputs contain the side part of the signal."),
        li(
            b("Sides"),
            " - the left stereo output contains the side part of the output signal, "
            "the right stereo output contains the phase-inverted side of the output signal.",
        ),
        li(
            b("Mid/Side"),
            " - the left stereo output contains the mid part of signal, "
            "the right stereo output contains the side part of the signal.",
        ),
        li(
            b("Side/Mid"),
            " - the left stereo output contains the side part of signal, "
            "the right stereo output contains the mid part of the signal.",
        ),
        li(b("Left"), " - the left and right stereo outputs contain only the left channel of the signal."),
        li(b("Right"), " - the left and right stereo outputs contain only the right channel of the signal."),
        li(b("Left Only"), " - the right stereo output is muted."),
        li(b("Right Only"), " - the left stereo output is muted."),
        _AUDIO_SAMPLE_GRAPH,
    ),
    "\n",
    label="monitoring-section",
)

_ANALYSIS = ul(
    li(
        b("Display"),
        " - allows to select for which audio signal graphs and charts will be drawn:",
        ul(
            li(b("Mix"), " - the button that allows drawing of charts for the mix signal."),
            li(b("Ref"), " - the button that allows drawing of charts for the reference signal."),
        ),
    ),
    li(
        b("Controls"),
        " - additional control over the graphs and charts:",
        ul(
            li(b("Curr"), " - the button that turns on drawing of current values on spectrum-related graphs."),
            li(b("Min"), " - the button that turns on drawing of minimums on spectrum-related graphs."),
            li(b("Max"), " - the button that turns on drawing of maximums on spectrum-related graphs."),
            li(b("Freeze"), " - the button that stops any update of graphs."),
            li(b("Reset"), " - the button that resets minimum and maximum values on spectrum-related graphs."),
        ),
    ),
    li(b("Window"), " - the weighting window applied to the audio data before performing spectral analysis."),
    li(b("Tolerance"), " - the number of points for the spectral analysis using FFT (Fast Fourier Transform)."),
    li(b("Envelope"), " - the additional envelope compensation of the signal on the spectrum-related graphs."),
    li(b("Reactivity"), " - the reactivity (smoothness) of the spectral analysis."),
    li(b("Damping"), " button - the button that enables damping of minimums and maximums."),
    li(b("Damping"), " knob - the knob that controls the damping speed of minimums and maximums."),
    li(b("Period"), " - the maximum time period displayed on the time graphs."),
)

# (band, default range, lower neighbour) of the filter band buttons and knobs
_FILTER_BANDS = [
    ("Bass", "between 60 Hz and 250 Hz", "sub-bass"),
    ("Low Mid", "between 250 Hz and 500 Hz", "bass"),
    ("Mid", "between 500 Hz and 2 kHz", "low-mid"),
    ("High Mid", "between 2 kHz and 6 kHz", "mid"),
    ("High", "above 6 kHz", "high-mid"),
]


def _band_items() -> list[Container]:
    items = []
    for band, band_range, lower in _FILTER_BANDS:
        name = band.lower().replace(" ", "-")
        items.append(
            li(
                b(band),
                f" button - configures the filter to pass {name} band only "
                f"(by default frequency range {band_range}).",
            )
        )
        items.append(
            li(b(band), f" knob - configures the split frequency between {lower} and {name} bands.")
        )
    return items


_FILTER = ul(
    li(b("Off"), " button - disables any filtering."),
    li(
        b("Sub Bass"),
        " button - configures the filter to pass sub-bass band only "
        "(by default frequency range below 60 Hz).",
    ),
    *_band_items(),
    li(
        b("Position"),
        " - the filter position:",
        ul(
            li(b("Pre-eq"), " - the filter is applied before any metering is performed."),
            li(b("Post-Eq"), " - the filter is applied after any metering is performed."),
        ),
    ),
    li(b("Steepness"), " - the combo box that allows to set-up the steepness of the filter."),
    li(
        b("Mode"),
        " - filter processing mode:",
        ul(
            li(
                b("IIR"),
                " - Infinite Impulse Response filters, nonlinear minimal phase. "
                "In most cases does not add noticeable latency to output signal.",
            ),
            li(
                b("FIR"),
                " - Finite Impulse Response filters with linear phase, finite approximation of "
                "equalizer's impulse response. Adds noticeable latency to output signal.",
            ),
            li(
                b("FFT"),
                " - Fast Fourier Transform approximation of the frequency chart, linear phase. "
                "Adds noticeable latency to output signal.",
            ),
            li(
                b("SPM"),
                " - Spectral Processor Mode of equalizer, equalizer transforms the magnitude of "
                "signal spectrum instead of applying impulse response to the signal.",
            ),
        ),
    ),
)

REFERENCER_MANUAL = document(
    p(
        "The referencer plugin allows you to load your preferred reference files "
        "and compare them with your mix."
    ),
    p(
        "It provides almost all the sound engineer needs to analyze the mix while "
        "performing mixing and mastering operations:"
    ),
    _FEATURES,
    "\n",
    p(b("Source"), " section:"),
    _SOURCE,
    "\n",
    _MONITORING,
    p(
        b("Sample-loop Matrix"),
        " section - the section that allows to select current audio file (sample) and loop to play. "
        "Each row is associated with a file, and each button in a row is associated with the loop.",
    ),
    "\n",
    p(b("Analysis"), " section is responsible for tuning spectrum analysis and time analysis"),
    _ANALYSIS,
    "\n",
    p(b("Filter"), " section"),
    _FILTER,
    name="referencer",
)

# gameoverlay

gameoverlay is the logic behind a game-text translation overlay. It captures a
game window, runs OCR on the whole window or on chosen areas, sends the
recognised lines to a translation web page in one request, and works out where
each translated line should be drawn over the window.

The OCR engine, the window capturer and the browser tab are supplied by the
caller. gameoverlay defines what it needs from each of them as a protocol.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command

```
gameoverlay languages
gameoverlay ocr-language CODE
gameoverlay profiles [--data PATH]
```

- `languages` prints every translation language, one per line, as its code and
  its name separated by a tab.
- `ocr-language CODE` prints the name of a Tesseract language code, followed by
  the translation language code it translates from. Unknown codes are named
  `Invalid` and map to `auto`.
- `profiles` prints each saved profile as its title, its application and its
  number of areas. The profiles are read from `data.json` in the user data
  directory, or from `--data PATH` if that option is given.

If no subcommand is given, the command prints its help.

## Library

- **Areas** (`gameoverlay.areas.AreaData`). An area is a rectangle (`x`, `y`,
  `width`, `height`) plus its `text`. `to_dict()` leaves out the text, so
  recognised text is never saved.
- **Profiles** (`gameoverlay.profiles.ProfileData`). A profile holds a title,
  the application it captures, the OCR language, the target language,
  `use_areas`, and its list of areas. `save_profiles(profiles, path)` writes
  profiles as JSON and `load_profiles(path)` reads them back. A missing file
  gives an empty list.
- **Settings** (`gameoverlay.settings.Settings`). The settings hold the OCR
  language, the target language and the translation provider.
  `Settings.load(path)` reads them, and gives defaults when the file is missing.
  `set(prop, value)` accepts `"ocr-lang"`, `"tra-lang"` and `"tra-provider"`,
  ignores any other name, and writes the file after each call.
  `effective_provider()` returns `"google"` when no provider is set.
- **Workspace** (`gameoverlay.workspace.Workspace`). The workspace is the list
  of profiles and the selected one. `Workspace.load(data_file, settings)` always
  leaves at least one profile and selects the first. A fresh profile is titled
  `[New Profile]`, and a new one is not added while the last profile still has
  that title. `drag(x, y, width, height)` edits the selected profile's areas as
  follows:
  - a click with no movement removes the areas under the pointer;
  - a drag that starts inside an area moves that area by the drag;
  - a purely horizontal or vertical drag changes nothing;
  - any other drag adds a new rectangle, unless it overlaps an existing one.

  `apply_drag(areas, x, y, width, height)` applies the same rule to a plain list
  of areas.
- **Screen capture** (`gameoverlay.screen`). `ScreenData` names the selected
  window. Given a `WindowSource`, it can do three things. `capture_screen`
  draws the window onto a monitor-sized RGBA image. `capture` saves that image
  as a temporary PNG. `capture_areas` saves one PNG per area.
  `shorten_title` shortens long window titles for display.
- **OCR** (`gameoverlay.ocr`). `OcrLanguage.from_code("jpn")` describes a
  Tesseract language code, and `to_translator()` maps it to a translation
  language, or to `auto`. Given an `OcrEngine`, `ocr_areas`, `ocr_screen` and
  `ocr_image` read text. The temporary capture files are removed after reading.
  `group_lines` joins OCR words into lines.
- **Translation** (`gameoverlay.translator`). `all_languages()` lists the 30
  target languages, with `auto` first. `Translator` translates through a
  `BrowserTab`. The provider `"google"` uses Google Translate, and any other
  provider name uses DeepL. `translate_from_ocr` sends every area's text in one
  request, with each line prefixed by `-> `, and puts the pieces back into the
  areas. `google_url` and `deepl_url` show the page a request loads.
- **Sessions** (`gameoverlay.session.Session`). A session moves between the
  `STOPPED`, `STARTED` and `PAUSED` states of `gameoverlay.state.State`.
  `on_action` starts or stops it. `configure` enters or leaves `PAUSED` for area
  editing. `run_once` performs one capture, OCR and translation cycle and
  returns `TextPlacement`s. Failures are raised as `SessionError`, and the
  session is stopped.
- **Layout** (`gameoverlay.session.layout_text`). Horizontal text places each
  line below the previous one. Vertical text places each character below the
  previous one, with each new line to the right. The font size comes from
  `gameoverlay.utils.calc_font_size`.

## What it does not do

gameoverlay has no graphical window, no overlay window and no drawing code. It
computes text placements and rectangles but does not put them on screen. It
does not run the translation cycle in a loop by itself.

It also has no built-in window capturer, OCR engine or browser. Capture, OCR
and translation work only once objects implementing `WindowSource`, `OcrEngine`
and `BrowserTab` are passed in.

## Files

Settings are kept in `settings.json` and profiles in `data.json`. Both are in a
`gameoverlay` folder inside the user data directory. Screenshots are written to
a `gameoverlay` folder under the system temporary directory.
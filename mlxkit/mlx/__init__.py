"""Images, textures, PNG and XPM42 loaders, window state and the event-loop context."""
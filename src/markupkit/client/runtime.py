"""Browser runtime for partial-page navigation.

The in-browser counterpart of ``Navigator``: exposes
``window.MarkupComponents`` with ``load(href, target, options)``,
``on(event, listener, triggerAfterAjax)`` and ``off(event, listener)``.
It speaks the same JSON contract as ``markupkit.page.respond``.

Options for ``load``: ``delay`` (minimum milliseconds before the
splice), ``history`` (push the URL), ``historyIgnoreSegment`` (trim the
URL at the last occurrence of this segment first).

Emit it once per full page, e.g. with ``navigator_snippet()`` before
``</body>``.
"""

NAVIGATOR_JS = """\
(function(){
  if(window.MarkupComponents)return;
  var ajaxListeners=[];
  var headers={"X-Requested-With":"XMLHttpRequest"};
  var SCRIPT_RE=/<script\\b([^>]*)>([\\s\\S]*?)<\\/script\\s*>/gi;
  var ATTR_RE=/([^\\s=\\/>"']+)(?:\\s*=\\s*(["'])([\\s\\S]*?)\\2)?/g;

  function extractScripts(html){
    var scripts=[];
    html=html.replace(SCRIPT_RE,function(match,attrs,content){
      if(!content.trim())return match;
      var script=document.createElement("script");
      script.text=content;
      attrs.replace(ATTR_RE,function(_,name,q,value){
        script.setAttribute(name,value||"");
        return "";
      });
      scripts.push(script);
      return "";
    });
    return {html:html,scripts:scripts};
  }

  function assetElement(type,file){
    var isJs=type==="scripts";
    var tag=document.createElement(isJs?"script":"link");
    if(isJs){
      tag.src=file.src;
      // keep execution order for dependent scripts
      tag.async=false;
    }else{
      tag.href=file.src;
      tag.rel="stylesheet";
      tag.type="text/css";
    }
    var attr=file.attr||{};
    Object.keys(attr).forEach(function(name){
      if(/^\\d+$/.test(name))tag.setAttribute(attr[name],"");
      else tag.setAttribute(name,attr[name]);
    });
    return tag;
  }

  function injectAssets(json){
    ["styles","scripts"].forEach(function(type){
      (json[type]||[]).forEach(function(file){
        var key=type==="scripts"?"src":"href";
        if(document.querySelector("["+key+'="'+file.src+'"]'))return;
        document.head.appendChild(assetElement(type,file));
      });
    });
  }

  function load(href,target,options){
    target=target||document.body;
    if(!href)return Promise.resolve();
    if(typeof target==="string"){
      target=document.querySelector(target);
      if(!target)return Promise.resolve();
    }
    options=Object.assign({delay:0,history:false,historyIgnoreSegment:""},options||{});
    var started=Date.now();
    return fetch(href,{headers:headers})
      .then(function(res){
        if(!res.ok)throw new Error(res.status+" "+res.statusText);
        return res.json();
      })
      .then(function(json){
        var extracted=extractScripts(json.html);
        injectAssets(json);
        if(options.history){
          var url=href;
          var seg=options.historyIgnoreSegment;
          if(seg&&typeof seg==="string"&&url.lastIndexOf(seg)!==-1){
            url=url.slice(0,url.lastIndexOf(seg));
          }
          history.pushState("","",url);
        }
        return new Promise(function(resolve){
          setTimeout(function(){
            target.innerHTML="";
            target.insertAdjacentHTML("beforeend",extracted.html);
            extracted.scripts.forEach(function(script){target.appendChild(script);});
            requestAnimationFrame(function(){
              trigger("ajax");
              resolve();
            });
          },Math.max(0,options.delay-(Date.now()-started)));
        });
      })
      .catch(function(error){
        console.error(error);
        throw error;
      });
  }

  function on(event,listener,triggerAfterAjax){
    if(event==="load"){
      if(document.readyState==="complete")listener();
      else window.addEventListener("load",listener);
      if(triggerAfterAjax)on("ajax",listener);
    }else if(event==="ajax"){
      ajaxListeners.push(listener);
    }
  }

  function off(event,listener){
    if(event==="load")window.removeEventListener("load",listener);
    else if(event==="ajax")ajaxListeners=ajaxListeners.filter(function(fn){return fn!==listener;});
  }

  function trigger(event){
    if(event==="ajax")ajaxListeners.slice().forEach(function(fn){
      try{fn();}catch(e){console.error(e);}
    });
  }

  window.MarkupComponents={load:load,on:on,off:off};
})();
"""


def navigator_snippet() -> str:
    """Return the runtime wrapped in a ``<script>`` tag."""
    return '<script data-markupkit="navigator">' + NAVIGATOR_JS + "</script>"
